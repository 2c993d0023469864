"""Signature splitting and member consistency checks."""

from collections.abc import Iterable

from busdef.defs import ArgDef, Direction, MemberDef, MethodDef

BASIC_TYPES = frozenset("ybnqiuxtdhsog")
VARIANT = "v"
ARRAY = "a"
STRUCT_OPEN, STRUCT_CLOSE = "(", ")"
DICT_OPEN, DICT_CLOSE = "{", "}"

# Bus limits; dict entries count towards the struct depth
MAX_SIGNATURE_LENGTH = 255
MAX_ARRAY_DEPTH = 32
MAX_STRUCT_DEPTH = 32


class SignatureError(ValueError):
    """Raised when a signature is not a sequence of complete types."""


def _complete_type(sig: str, pos: int, arrays: int = 0, structs: int = 0) -> int:
    """Return the index just past the complete type starting at pos."""
    if pos >= len(sig):
        raise SignatureError(f"Signature {sig!r} ends inside a container")

    code = sig[pos]
    if code in BASIC_TYPES or code == VARIANT:
        return pos + 1

    if code == ARRAY:
        arrays += 1
        if arrays > MAX_ARRAY_DEPTH:
            raise SignatureError(f"Arrays nested deeper than {MAX_ARRAY_DEPTH} in {sig!r}")
        if pos + 1 < len(sig) and sig[pos + 1] == DICT_OPEN:
            return _dict_entry(sig, pos + 1, arrays, structs + 1)
        return _complete_type(sig, pos + 1, arrays, structs)

    if code == STRUCT_OPEN:
        structs += 1
        if structs > MAX_STRUCT_DEPTH:
            raise SignatureError(f"Structs nested deeper than {MAX_STRUCT_DEPTH} in {sig!r}")
        pos += 1
        if pos < len(sig) and sig[pos] == STRUCT_CLOSE:
            raise SignatureError(f"Empty struct in {sig!r}")
        while pos < len(sig) and sig[pos] != STRUCT_CLOSE:
            pos = _complete_type(sig, pos, arrays, structs)
        if pos >= len(sig):
            raise SignatureError(f"Unterminated struct in {sig!r}")
        return pos + 1

    if code == DICT_OPEN:
        raise SignatureError(f"Dict entry outside an array in {sig!r}")

    raise SignatureError(f"Unknown type code {code!r} in {sig!r}")


def _dict_entry(sig: str, pos: int, arrays: int, structs: int) -> int:
    # sig[pos] is the opening brace
    if structs > MAX_STRUCT_DEPTH:
        raise SignatureError(f"Structs nested deeper than {MAX_STRUCT_DEPTH} in {sig!r}")
    key = pos + 1
    if key >= len(sig) or sig[key] not in BASIC_TYPES:
        raise SignatureError(f"Dict key must be a basic type in {sig!r}")
    end = _complete_type(sig, key + 1, arrays, structs)
    if end >= len(sig) or sig[end] != DICT_CLOSE:
        raise SignatureError(f"Dict entry must hold exactly two types in {sig!r}")
    return end + 1


def split_signature(sig: str) -> list[str]:
    """Split a signature into its complete types.

    >>> split_signature("sa{sv}(ii)")
    ['s', 'a{sv}', '(ii)']
    """
    if len(sig) > MAX_SIGNATURE_LENGTH:
        raise SignatureError(
            f"Signature is {len(sig)} characters long, limit is {MAX_SIGNATURE_LENGTH}"
        )
    types: list[str] = []
    pos = 0
    while pos < len(sig):
        end = _complete_type(sig, pos)
        types.append(sig[pos:end])
        pos = end
    return types


def is_valid_signature(sig: str) -> bool:
    try:
        split_signature(sig)
    except SignatureError:
        return False
    return True


def args_signature(args: Iterable[ArgDef]) -> str:
    """Concatenate the type tokens of a list of arguments."""
    return "".join(arg.type_signature for arg in args)


def check_member(member: MemberDef) -> list[str]:
    """List the ways a member's arguments disagree with its signatures."""
    problems: list[str] = []
    label = f"{member.interface_name}.{member.name}"

    for arg in member.args:
        try:
            types = split_signature(arg.type_signature)
        except SignatureError as e:
            problems.append(f"{label}: argument {arg.name}: {e}")
            continue
        if len(types) != 1:
            problems.append(
                f"{label}: argument {arg.name} has {len(types)} complete types, expected 1"
            )

    signatures = [("signature", member.signature, list(member.args))]
    if isinstance(member, MethodDef):
        signatures = [
            ("signature", member.signature, list(member.in_args)),
            ("reply signature", member.reply_signature, list(member.out_args)),
        ]
    else:
        for arg in member.args:
            if arg.direction == Direction.IN:
                problems.append(f"{label}: signal argument {arg.name} cannot be an input")

    for label_kind, sig, args in signatures:
        if not is_valid_signature(sig):
            problems.append(f"{label}: invalid {label_kind} {sig!r}")
            continue
        # Members declared without argument names carry no args to compare
        if args and args_signature(args) != sig:
            problems.append(
                f"{label}: {label_kind} {sig!r} does not match arguments "
                f"{args_signature(args)!r}"
            )

    return problems
