from .base import *
from .relocate import *
from .reverse import *
