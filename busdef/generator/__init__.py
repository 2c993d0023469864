"""Definition file front end and introspection tooling."""

from .introspect import render as render
from .introspect import render_interface as render_interface
from .parser import ValidationError as ValidationError
from .parser import parse as parse
from .parser import validate as validate
from .signature import SignatureError as SignatureError
from .signature import check_member as check_member
from .signature import split_signature as split_signature
from .xml_reader import read as read
