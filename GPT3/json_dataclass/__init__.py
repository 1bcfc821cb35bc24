from .implementation import json_dataclass, wire_excluded, is_optional
from dataclasses import field
