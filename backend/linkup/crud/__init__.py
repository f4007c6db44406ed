from .user import *
from .connection import *
from .connection_request import *
from .notification import *
