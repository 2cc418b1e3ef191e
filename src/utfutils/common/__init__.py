from .enum import *
from .config import *
