from dataclasses import dataclass
from typing import Optional
from datetime import datetime

from utils.helpers import parse_timestamp

# (value, label, description) in the order the form shows them
FEEDBACK_CATEGORIES = [
    ('service', 'Technical Service', 'Quality of technical support and expertise'),
    ('equipment', 'Repair Quality', 'Hardware repair and maintenance services'),
    ('website', 'Customer Service', 'Staff behavior and customer interaction'),
    ('staff', 'Response Time', 'Speed of service delivery and communication'),
    ('pricing', 'Pricing & Value', 'Cost effectiveness and value for money'),
    ('suggestion', 'Overall Experience', 'Complete service experience evaluation'),
]
FEEDBACK_CATEGORY_VALUES = [value for value, _, _ in FEEDBACK_CATEGORIES]

RATING_TEXT = {
    1: 'Very Dissatisfied',
    2: 'Dissatisfied',
    3: 'Neutral',
    4: 'Satisfied',
    5: 'Extremely Satisfied',
}


@dataclass
class Author:
    """The user who submitted a record, as resolved by the backend."""
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_api(cls, data):
        if not data:
            return None
        if isinstance(data, str):
            # Unpopulated reference: only the user id came back
            return cls(id=data)
        return cls(id=data.get('_id') or data.get('id'),
                   name=data.get('name'),
                   email=data.get('email'))


@dataclass
class FeedbackRecord:
    """Customer feedback as returned by the backend."""
    id: str
    subject: str
    category: str
    rating: int
    message: str
    is_anonymous: bool = False
    author: Optional[Author] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data):
        return cls(
            id=str(data.get('_id') or data.get('id') or ''),
            subject=data.get('subject') or '',
            category=data.get('category') or '',
            rating=data.get('rating') or 0,
            message=data.get('message') or '',
            is_anonymous=bool(data.get('isAnonymous', False)),
            author=Author.from_api(data.get('user') or data.get('author')),
            created_at=parse_timestamp(data.get('createdAt')),
        )

    def to_values(self):
        """Draft values for editing this record."""
        return {
            'subject': self.subject,
            'category': self.category,
            'rating': self.rating,
            'message': self.message,
            'isAnonymous': self.is_anonymous,
        }

    @property
    def category_label(self):
        for value, label, _ in FEEDBACK_CATEGORIES:
            if value == self.category:
                return label
        return self.category.replace('-', ' ').title()

    @property
    def rating_text(self):
        return RATING_TEXT.get(self.rating, '')
