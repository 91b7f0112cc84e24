"""
Record kinds handled by the portal.

Feedback and support tickets share one form and list workflow. Everything
that differs between them (fields, defaults, rules, endpoints, messages)
lives on a RecordKind, so the controllers only ever branch on data.
"""
from utils.validation import Required, Length, OneOf, WholeNumber, Range, validate, validate_field
from .feedback import FeedbackRecord, FEEDBACK_CATEGORY_VALUES
from .ticket import SupportTicketRecord, TICKET_CATEGORY_VALUES, TICKET_PRIORITY_VALUES

TRUTHY_FORM_VALUES = ('on', 'true', '1', 'yes')


class RecordKind:
    """Kind discriminant plus the kind-specific field set and rule set."""

    def __init__(self, name, endpoint, defaults, field_types, rules, record_class,
                 list_endpoints, collection_key, filters, search_fields,
                 delete_endpoints=None, messages=None):
        self.name = name
        self.endpoint = endpoint
        self.defaults = defaults
        self.field_types = field_types
        self.rules = rules
        self.record_class = record_class
        self.list_endpoints = list_endpoints
        self.collection_key = collection_key
        self.filters = filters
        self.search_fields = search_fields
        self.delete_endpoints = delete_endpoints
        self.messages = messages or {}

    def __repr__(self):
        return f"<RecordKind {self.name}>"

    @property
    def fields(self):
        return list(self.defaults)

    @property
    def deletable(self):
        return self.delete_endpoints is not None

    def initial_values(self, existing=None):
        values = dict(self.defaults)
        if existing is not None:
            values.update(existing.to_values())
        return values

    def coerce(self, form):
        """Turn submitted form strings into typed draft values.

        Only fields of this kind are kept. Checkboxes that are absent from
        the form are False, like a browser would submit them.
        """
        values = {}
        for name, field_type in self.field_types.items():
            raw = form.get(name)
            if field_type is bool:
                values[name] = str(raw).strip().lower() in TRUTHY_FORM_VALUES if raw is not None else False
            elif raw is None:
                continue
            elif field_type is int:
                values[name] = coerce_number(raw)
            else:
                values[name] = str(raw).strip()
        return values

    def validate(self, values):
        return validate(self.rules, values)

    def validate_field(self, name, value):
        return validate_field(self.rules, name, value)

    def message(self, key):
        return self.messages[key]

    def record_from_api(self, data):
        return self.record_class.from_api(data)


def coerce_number(raw):
    """Parse a form number, keeping what cannot be a whole number invalid."""
    if isinstance(raw, (int, float)):
        return raw
    text = str(raw).strip()
    if text == '':
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


FEEDBACK = RecordKind(
    name='feedback',
    endpoint='/feedback',
    defaults={
        'subject': '',
        'category': '',
        'rating': 5,
        'message': '',
        'isAnonymous': False,
    },
    field_types={
        'subject': str,
        'category': str,
        'rating': int,
        'message': str,
        'isAnonymous': bool,
    },
    rules={
        'subject': [Required('Subject'), Length('Subject', 5, 100)],
        'category': [Required('Category'), OneOf('Category', FEEDBACK_CATEGORY_VALUES)],
        'rating': [Required('Rating'), WholeNumber('Rating'), Range('Rating', 1, 5)],
        'message': [Required('Message'), Length('Message', 10, 500)],
    },
    record_class=FeedbackRecord,
    list_endpoints={'mine': '/feedback/my-feedback', 'all': '/feedback'},
    collection_key='feedback',
    filters=('category', 'rating'),
    search_fields=('subject', 'message'),
    delete_endpoints={'mine': '/feedback/{id}', 'all': '/feedback/admin/{id}'},
    messages={
        'created': 'feedback_submitted',
        'updated': 'feedback_updated',
        'deleted': 'feedback_deleted',
        'submit_failed': 'error_submit_feedback',
        'fetch_failed': 'error_fetch_feedback',
        'delete_failed': 'error_delete_feedback',
    },
)

SUPPORT_TICKET = RecordKind(
    name='support_ticket',
    endpoint='/support-tickets',
    defaults={
        'subject': '',
        'category': '',
        'priority': 'medium',
        'description': '',
    },
    field_types={
        'subject': str,
        'category': str,
        'priority': str,
        'description': str,
    },
    rules={
        'subject': [Required('Subject'), Length('Subject', 5, 100)],
        'category': [Required('Category'), OneOf('Category', TICKET_CATEGORY_VALUES)],
        'priority': [Required('Priority'), OneOf('Priority', TICKET_PRIORITY_VALUES)],
        'description': [Required('Description'), Length('Description', 20, 1000)],
    },
    record_class=SupportTicketRecord,
    list_endpoints={'mine': '/support-tickets/my-tickets', 'all': '/support-tickets'},
    collection_key='tickets',
    filters=('status', 'category', 'priority'),
    search_fields=('subject', 'id'),
    messages={
        'created': 'ticket_created',
        'updated': 'ticket_updated',
        'submit_failed': 'error_create_ticket',
        'fetch_failed': 'error_fetch_tickets',
    },
)

KINDS = {kind.name: kind for kind in (FEEDBACK, SUPPORT_TICKET)}
