from flask import current_app
from flask_mail import Message
from threading import Thread
from eventhub.extensions import mail


def send_async_email(app, msg):
    with app.app_context():
        try:
            mail.send(msg)
        except Exception as e:
            app.logger.error(f"Failed to send email: {e}")


def send_registration_confirmation(user, event):
    """E-mail a copy of the in-app registration notification."""
    app = current_app._get_current_object()
    subject = f"Registration confirmed - {event.title}"
    when = event.date.strftime("%B %d, %Y at %I:%M %p") if event.date else "TBA"

    # If in testing mode, or no mail server is configured, log the email instead of sending it
    if app.testing or not app.config.get("MAIL_SERVER"):
        app.logger.info("--- MOCK REGISTRATION EMAIL ---")
        app.logger.info(f"To: {user.email}")
        app.logger.info(f"Subject: {subject}")
        app.logger.info(f"Event: {event.title} on {when} at {event.location}")
        app.logger.info("--- END MOCK REGISTRATION EMAIL ---")
        return

    msg = Message(
        subject,
        sender=app.config.get("MAIL_DEFAULT_SENDER") or app.config.get("MAIL_USERNAME"),
        recipients=[user.email],
    )

    msg.body = f"""
Hi {user.name},

You have successfully registered for "{event.title}".

Event Details:
- Date: {when}
- Location: {event.location}

See you there!
"""

    Thread(target=send_async_email, args=(app, msg)).start()
