"""
agmd: transport-coefficient and flux closures for air gap membrane distillation.
"""

from . import constants
from . import validation
from . import parameters
from . import properties
from . import channel
from . import membrane
from . import polarization
from . import flux
from . import segment
from . import config
from . import sweep
