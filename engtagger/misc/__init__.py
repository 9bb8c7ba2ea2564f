from .environ import *
