# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Value Representation (VR) configuration."""

from enum import Enum, unique


@unique
class VR(str, Enum):
    """DICOM Data Element's Value Representation (VR)"""
    # Standard VRs from Table 6.2-1 in Part 5
    AE = "AE"
    AS = "AS"
    AT = "AT"
    CS = "CS"
    DA = "DA"
    DS = "DS"
    DT = "DT"
    FD = "FD"
    FL = "FL"
    IS = "IS"
    LO = "LO"
    LT = "LT"
    OB = "OB"
    OD = "OD"
    OF = "OF"
    OL = "OL"
    OW = "OW"
    OV = "OV"
    PN = "PN"
    SH = "SH"
    SL = "SL"
    SQ = "SQ"
    SS = "SS"
    ST = "ST"
    SV = "SV"
    TM = "TM"
    UC = "UC"
    UI = "UI"
    UL = "UL"
    UN = "UN"
    UR = "UR"
    US = "US"
    UT = "UT"
    UV = "UV"

    def __str__(self) -> str:
        return str.__str__(self)


# The only VRs a Native DICOM Model ``vr`` attribute may hold
STANDARD_VR = frozenset(VR)

# VRs whose single value is converted by DicomAttribute.extract_value()
FLOAT_VR = frozenset({VR.OF, VR.OD, VR.FL, VR.FD, VR.DS})
INT_VR = frozenset({
    VR.OL, VR.OV, VR.SL, VR.SS, VR.SV, VR.UL, VR.US, VR.UV,
})


def is_valid_vr(vr: object) -> bool:
    """Return ``True`` if `vr` is one of the standard two-letter VRs."""
    return isinstance(vr, str) and vr in STANDARD_VR
