from dataclasses import dataclass
from typing import Optional
from datetime import datetime

from utils.helpers import parse_timestamp

TICKET_CATEGORIES = [
    ('technical', 'Technical Issues', 'Hardware problems, repairs, and upgrades'),
    ('billing', 'Billing & Payments', 'Invoice inquiries and payment issues'),
    ('equipment', 'Equipment Support', 'Printers and peripherals troubleshooting'),
    ('general', 'General Support', 'Account assistance and general inquiries'),
    ('complaint', 'Complaints', 'Report service dissatisfaction'),
]
TICKET_CATEGORY_VALUES = [value for value, _, _ in TICKET_CATEGORIES]

# (value, label, description, expected response time)
TICKET_PRIORITIES = [
    ('low', 'Low', 'General questions', '24-48h'),
    ('medium', 'Medium', 'Standard issues', '4-24h'),
    ('high', 'High', 'Urgent issues', '1-4h'),
    ('urgent', 'Critical', 'System down', '< 1h'),
]
TICKET_PRIORITY_VALUES = [value for value, _, _, _ in TICKET_PRIORITIES]

# Set by support staff tooling, never by the portal
TICKET_STATUSES = ['open', 'in-progress', 'resolved', 'closed']


@dataclass
class SupportTicketRecord:
    """Support ticket as returned by the backend."""
    id: str
    subject: str
    category: str
    priority: str
    description: str
    status: str = 'open'
    admin_reply: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data):
        return cls(
            id=str(data.get('_id') or data.get('id') or ''),
            subject=data.get('subject') or '',
            category=data.get('category') or '',
            priority=data.get('priority') or 'medium',
            description=data.get('description') or '',
            status=data.get('status') or 'open',
            admin_reply=data.get('adminReply') or None,
            created_at=parse_timestamp(data.get('createdAt')),
        )

    def to_values(self):
        return {
            'subject': self.subject,
            'category': self.category,
            'priority': self.priority,
            'description': self.description,
        }

    @property
    def short_id(self):
        return self.id[-8:].upper()

    @property
    def priority_badge(self):
        for value, _, _, badge in TICKET_PRIORITIES:
            if value == self.priority:
                return badge
        return ''
