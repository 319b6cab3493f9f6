"""
Names of the 48 Reeds-Shepp path words.

Letters give the steering (L, S, R), `f`/`b` the gear, `u` marks the equal-length
arcs of the CCu|CuC and C|CuCu|C families and `pi2` a fixed quarter-turn arc.
The words are shared vocabulary with the solver; nothing here is computed.
"""

from enum import Enum
from typing import Dict, Tuple


class PathWord(Enum):
    # 8.1: CSC, same turn
    LfSfLf = "LfSfLf"
    LbSbLb = "LbSbLb"
    RfSfRf = "RfSfRf"
    RbSbRb = "RbSbRb"

    # 8.2: CSC, different turn
    LfSfRf = "LfSfRf"
    LbSbRb = "LbSbRb"
    RfSfLf = "RfSfLf"
    RbSbLb = "RbSbLb"

    # 8.3: C|C|C
    LfRbLf = "LfRbLf"
    LbRfLb = "LbRfLb"
    RfLbRf = "RfLbRf"
    RbLfRb = "RbLfRb"

    # 8.4: C|CC
    LfRbLb = "LfRbLb"
    LbRfLf = "LbRfLf"
    RfLbRb = "RfLbRb"
    RbLfRf = "RbLfRf"
    # 8.4: CC|C
    LfRfLb = "LfRfLb"
    LbRbLf = "LbRbLf"
    RfLfRb = "RfLfRb"
    RbLbRf = "RbLbRf"

    # 8.7: CCu|CuC
    LfRufLubRb = "LfRufLubRb"
    LbRubLufRf = "LbRubLufRf"
    RfLufRubLb = "RfLufRubLb"
    RbLubRufLf = "RbLubRufLf"

    # 8.8: C|CuCu|C
    LfRubLubRf = "LfRubLubRf"
    LbRufLufRb = "LbRufLufRb"
    RfLubRubLf = "RfLubRubLf"
    RbLufRufLb = "RbLufRufLb"

    # 8.9: C|C(pi/2)SC, same turn
    LfRbpi2SbLb = "LfRbpi2SbLb"
    LbRfpi2SfLf = "LbRfpi2SfLf"
    RfLbpi2SbRb = "RfLbpi2SbRb"
    RbLfpi2SfRf = "RbLfpi2SfRf"

    # 8.10: C|C(pi/2)SC, different turn
    LfRbpi2SbRb = "LfRbpi2SbRb"
    LbRfpi2SfRf = "LbRfpi2SfRf"
    RfLbpi2SbLb = "RfLbpi2SbLb"
    RbLfpi2SfLf = "RbLfpi2SfLf"

    # 8.9 reversed: CSC(pi/2)|C, same turn
    LfSfRfpi2Lb = "LfSfRfpi2Lb"
    LbSbRbpi2Lf = "LbSbRbpi2Lf"
    RfSfLfpi2Rb = "RfSfLfpi2Rb"
    RbSbLbpi2Rf = "RbSbLbpi2Rf"

    # 8.10 reversed: CSC(pi/2)|C, different turn
    LfSfLfpi2Rb = "LfSfLfpi2Rb"
    LbSbLbpi2Rf = "LbSbLbpi2Rf"
    RfSfRfpi2Lb = "RfSfRfpi2Lb"
    RbSbRbpi2Lf = "RbSbRbpi2Lf"

    # 8.11: C|C(pi/2)SC(pi/2)|C
    LfRbpi2SbLbpi2Rf = "LfRbpi2SbLbpi2Rf"
    LbRfpi2SfLfpi2Rb = "LbRfpi2SfLfpi2Rb"
    RfLbpi2SbRbpi2Lf = "RfLbpi2SbRbpi2Lf"
    RbLfpi2SfRfpi2Lb = "RbLfpi2SfRfpi2Lb"


def _words(*names: str) -> Tuple[PathWord, ...]:
    return tuple(PathWord[name] for name in names)


PATH_WORD_FAMILIES: Dict[str, Tuple[PathWord, ...]] = {
    "CSC same turn": _words("LfSfLf", "LbSbLb", "RfSfRf", "RbSbRb"),
    "CSC different turn": _words("LfSfRf", "LbSbRb", "RfSfLf", "RbSbLb"),
    "C|C|C": _words("LfRbLf", "LbRfLb", "RfLbRf", "RbLfRb"),
    "C|CC, CC|C": _words(
        "LfRbLb", "LbRfLf", "RfLbRb", "RbLfRf", "LfRfLb", "LbRbLf", "RfLfRb", "RbLbRf"
    ),
    "CCu|CuC": _words("LfRufLubRb", "LbRubLufRf", "RfLufRubLb", "RbLubRufLf"),
    "C|CuCu|C": _words("LfRubLubRf", "LbRufLufRb", "RfLubRubLf", "RbLufRufLb"),
    "C|C(pi/2)SC same turn": _words("LfRbpi2SbLb", "LbRfpi2SfLf", "RfLbpi2SbRb", "RbLfpi2SfRf"),
    "C|C(pi/2)SC different turn": _words("LfRbpi2SbRb", "LbRfpi2SfRf", "RfLbpi2SbLb", "RbLfpi2SfLf"),
    "CSC(pi/2)|C same turn": _words("LfSfRfpi2Lb", "LbSbRbpi2Lf", "RfSfLfpi2Rb", "RbSbLbpi2Rf"),
    "CSC(pi/2)|C different turn": _words("LfSfLfpi2Rb", "LbSbLbpi2Rf", "RfSfRfpi2Lb", "RbSbRbpi2Lf"),
    "C|C(pi/2)SC(pi/2)|C": _words(
        "LfRbpi2SbLbpi2Rf", "LbRfpi2SfLfpi2Rb", "RfLbpi2SbRbpi2Lf", "RbLfpi2SfRfpi2Lb"
    ),
}
