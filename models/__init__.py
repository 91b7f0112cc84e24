from .feedback import Author, FeedbackRecord, FEEDBACK_CATEGORIES, RATING_TEXT
from .ticket import SupportTicketRecord, TICKET_CATEGORIES, TICKET_PRIORITIES, TICKET_STATUSES
from .kinds import RecordKind, FEEDBACK, SUPPORT_TICKET, KINDS

__all__ = ['Author', 'FeedbackRecord', 'SupportTicketRecord', 'RecordKind',
           'FEEDBACK', 'SUPPORT_TICKET', 'KINDS', 'FEEDBACK_CATEGORIES', 'RATING_TEXT',
           'TICKET_CATEGORIES', 'TICKET_PRIORITIES', 'TICKET_STATUSES']
