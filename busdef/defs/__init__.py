"""Bus interface member definitions."""

from .annotations import ANNOTATION_ALIASES as ANNOTATION_ALIASES
from .annotations import Annotation as Annotation
from .annotations import parse_bool as parse_bool
from .arg import ArgDef as ArgDef
from .arg import Direction as Direction
from .base import BaseDef as BaseDef
from .base import FrozenDefinitionError as FrozenDefinitionError
from .base import InvalidArgumentError as InvalidArgumentError
from .interface import InterfaceDef as InterfaceDef
from .member import MemberDef as MemberDef
from .method import MethodDef as MethodDef
from .property import Access as Access
from .property import PropertyDef as PropertyDef
from .registry import InterfaceRegistry as InterfaceRegistry
from .registry import RegistryError as RegistryError
from .registry import dedupe_signals as dedupe_signals
from .signal import SignalDef as SignalDef
