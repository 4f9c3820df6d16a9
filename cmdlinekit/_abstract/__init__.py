"""

"""
from .parser import LineParser_i
