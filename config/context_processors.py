"""
Context Processor: Injects branding & message constants into every template.

Usage in templates:
    {{ SITE_NAME }}
    {{ COPYRIGHT_TEXT }}
    {{ MSG_LIST_HEADING }}
    etc.
"""

from config.constants.branding import (
    SITE_NAME, SITE_TAGLINE, META_DESCRIPTION, META_TITLE_SUFFIX,
    COPYRIGHT_TEXT,
)
from config.constants.messages import (
    MSG_LIST_HEADING, MSG_ADD_BUTTON, MSG_UPDATE_BUTTON, MSG_DELETE_BUTTON,
    MSG_SUBMIT_BUTTON,
)


def site_config(request):
    """Inject site-wide branding and labels into all templates."""
    return {
        # Branding
        'SITE_NAME': SITE_NAME,
        'SITE_TAGLINE': SITE_TAGLINE,
        'META_DESCRIPTION': META_DESCRIPTION,
        'META_TITLE_SUFFIX': META_TITLE_SUFFIX,
        'COPYRIGHT_TEXT': COPYRIGHT_TEXT,

        # Labels (for templates)
        'MSG_LIST_HEADING': MSG_LIST_HEADING,
        'MSG_ADD_BUTTON': MSG_ADD_BUTTON,
        'MSG_UPDATE_BUTTON': MSG_UPDATE_BUTTON,
        'MSG_DELETE_BUTTON': MSG_DELETE_BUTTON,
        'MSG_SUBMIT_BUTTON': MSG_SUBMIT_BUTTON,
    }
