"""
Email notifications for support tickets
"""
from email.utils import formataddr
from flask import current_app, render_template
from flask_mail import Message, Mail


def send_ticket_confirmation(ticket, user_name, user_email):
    """
    Send the customer a confirmation for a newly created support ticket.

    Args:
        ticket: The SupportTicketRecord returned by the backend
        user_name: Display name of the customer
        user_email: Address to send the confirmation to

    Returns:
        bool: True if the email was sent (or simulated), False otherwise
    """
    if not user_email:
        print(f"[Mail] No email address for ticket {ticket.id} - skipping confirmation")
        return False

    context = {
        'ticket': ticket,
        'user_name': user_name or 'Customer',
        'dashboard_url': f"{current_app.config.get('BASE_URL', 'http://localhost:8000')}/support",
    }
    subject = f"Support Ticket #{ticket.short_id} Created – {ticket.subject}"

    if not current_app.config.get('MAIL_SERVER'):
        print("[Mail] Email not configured - simulating ticket confirmation")
        print(f"[Mail] To: {user_email}")
        print(f"[Mail] Subject: {subject}")
        print("-" * 50)
        return True

    recipient = formataddr((user_name, user_email)) if user_name else user_email
    mail = Mail(current_app)

    try:
        msg = Message(
            subject=subject,
            recipients=[recipient],
            sender=current_app.config.get('MAIL_DEFAULT_SENDER'),
        )
        msg.body = render_template('email/ticket_confirmation.txt', **context)
        msg.html = render_template('email/ticket_confirmation.html', **context)
        mail.send(msg)
        print(f"[Mail] Sent ticket confirmation for {ticket.id} to {user_email}")
        return True
    except Exception as e:
        # SMTP errors vary by backend; a lost confirmation must not fail the ticket
        print(f"[Mail] Failed to send ticket confirmation: {e}")
        return False
