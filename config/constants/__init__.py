# Config Constants Package
# Import everything from sub-modules for easy access:
#   from config.constants import SITE_NAME, MSG_LIST_HEADING, etc.

from .branding import *
from .limits import *
from .messages import *
