"""
Support Service
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from eliteflix.errors import ValidationError, StoreError
from eliteflix.extensions import db
from eliteflix.models import SupportTicket
from eliteflix.services.sanitizer import sanitize

logger = logging.getLogger(__name__)


def submit_ticket(user_id, subject, message):
    """Store a support ticket with status 'open'.
    
    Raises:
        ValidationError: subject or message is empty after sanitizing
        StoreError: the insert failed
    """
    subject = sanitize(subject)
    message = sanitize(message)
    missing = [name for name, value in (('subject', subject), ('message', message)) if not value]
    if missing:
        raise ValidationError(missing)
    
    ticket = SupportTicket(user_id=user_id, subject=subject, message=message)
    try:
        db.session.add(ticket)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not save support ticket for user %s', user_id)
        raise StoreError('support ticket') from e
    logger.info('Support ticket %s opened by user %s', ticket.id, user_id)
    return ticket
