"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

from ..models.game import InputEvent

# Key names a front-end may forward instead of semantic events
_KEY_EVENTS = {
    'ENTER': InputEvent.submit,
    'RETURN': InputEvent.submit,
    'BACKSPACE': InputEvent.backspace,
    'F5': InputEvent.reset,
}


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)
    }


def event_from_key(key: str) -> Optional[InputEvent]:
    """
    Translate a raw key name into a semantic event.

    Letters become TYPE_LETTER, Enter submits, Backspace deletes and F5 resets.
    Any other key returns None.
    """
    if not isinstance(key, str) or not key:
        return None

    if len(key) == 1 and key.isalpha():
        return InputEvent.type_letter(key)

    factory = _KEY_EVENTS.get(key.upper())
    return factory() if factory else None
