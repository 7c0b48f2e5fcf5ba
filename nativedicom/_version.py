"""Pure python package for reading and writing Native DICOM Model XML."""
import re
from typing import cast, Match


__version__: str = '1.0.0'

result = cast(Match[str], re.match(r'(\d+\.\d+\.\d+).*', __version__))
__version_info__ = tuple(result.group(1).split('.'))


# Edition of DICOM PS3.19 whose Native DICOM Model schema is implemented
__dicom_version__: str = '2021d'
