from .api_client import ApiResult, BackendClient
from .notifier import FlashNotifier
from .mailer import send_ticket_confirmation
from .auth import login_required, admin_required, current_user

__all__ = ['ApiResult', 'BackendClient', 'FlashNotifier', 'send_ticket_confirmation',
           'login_required', 'admin_required', 'current_user']
