"""
Reader for the plain text edge list format.

The first token is the number of edges N, followed by N records of
"source target weight". Tokens are separated by any whitespace and labels
cannot contain whitespace, for example::

    3
    A B 1
    A C 8
    B C 3
"""

import logging
import os
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def read_edge_list(sFilename_in: str) -> Optional[List[Tuple[str, str, int]]]:
    """
    Read edge records from a file.

    Reading stops at the first incomplete record or non-integer weight; the
    records read before it are kept. Tokens after the N-th record are ignored.
    An empty file, or one that does not start with an integer count, holds
    no records.

    Args:
        sFilename_in: Path of the edge list file

    Returns:
        List of (source, target, weight) records, or None if the file cannot be
        opened or decoded
    """
    if not os.path.isfile(sFilename_in):
        logger.error(f"Edge list file not found: {sFilename_in}")
        return None

    try:
        with open(sFilename_in, 'r') as pFile:
            aToken = pFile.read().split()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read edge list file {sFilename_in}: {e}")
        return None

    if not aToken:
        logger.warning(f"Edge list file is empty: {sFilename_in}")
        return []

    try:
        nEdge = int(aToken[0])
    except ValueError:
        logger.warning(f"Edge list file {sFilename_in} does not start with an edge count: {aToken[0]!r}")
        return []

    aEdge = []
    for i in range(nEdge):
        iStart = 1 + 3 * i
        aRecord = aToken[iStart:iStart + 3]
        if len(aRecord) < 3:
            logger.warning(f"Edge list file {sFilename_in} declares {nEdge} edges but ends after {i}")
            break

        sLabel_source, sLabel_target, sWeight = aRecord
        try:
            iWeight = int(sWeight)
        except ValueError:
            logger.warning(f"Invalid weight {sWeight!r} in record {i + 1} of {sFilename_in}, stopping")
            break

        aEdge.append((sLabel_source, sLabel_target, iWeight))

    logger.debug(f"Read {len(aEdge)} edge records from {sFilename_in}")
    return aEdge
