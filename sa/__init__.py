"""Simulated annealing for the Euclidean traveling salesman problem"""

from . import tsp, utils
from .abc import *
from .acceptance import *
from .config import *
from .cooling import *
from .errors import *
from .reporters import *
from .rng import *
