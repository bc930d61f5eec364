from .bases import *
from .costs import *
from .results import *
from .solutions import *
