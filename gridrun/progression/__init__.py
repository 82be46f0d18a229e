from .nodes import MapNode, NodeMap  # noqa: F401
from .run import RunState  # noqa: F401
