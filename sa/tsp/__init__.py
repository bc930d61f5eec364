from .config import *
from .errors import *
from .neighborhoods import *
from .solutions import *
from .towns import *
