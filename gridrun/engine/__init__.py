from .module import RuleModule  # noqa: F401
from .orchestrator import TurnOrchestrator  # noqa: F401
