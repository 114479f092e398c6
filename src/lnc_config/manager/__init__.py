"""Challenge form management module."""
from .challenge_form import ChallengeFormManager
from .models import ChallengeConfig, EditingAt, Hint, Idle

__all__ = ['ChallengeFormManager', 'ChallengeConfig', 'EditingAt', 'Hint', 'Idle']
