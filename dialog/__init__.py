"""
Dialog modules for Met Office Decide.

This package contains the turn resolver that decides what to say and the
values it passes around.  The resolver itself lives in dialog.resolver.
"""

from dialog.errors import (ForecastOutOfRange, InvalidApplication, InvalidIntent,
                           MalformedRequest, ProtocolFault, ServiceUnavailable,
                           SkillError)
from dialog.models import ResolvedDate, ResolvedLocation, TurnDirective

__all__ = [
    'ResolvedDate', 'ResolvedLocation', 'TurnDirective',
    'SkillError', 'ServiceUnavailable', 'ProtocolFault', 'ForecastOutOfRange',
    'InvalidIntent', 'MalformedRequest', 'InvalidApplication',
]
