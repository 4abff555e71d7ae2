from tokenmap.key import Key
from tokenmap.map import ReadonlyTokenMap, TokenMap
from tokenmap.errors import TokenMapError, NotFound, ConflictOnSet
from tokenmap.policy import OnMiss, OnDeleteMiss, OnConflict

__all__ = [
    'Key',
    'TokenMap',
    'ReadonlyTokenMap',
    'TokenMapError',
    'NotFound',
    'ConflictOnSet',
    'OnMiss',
    'OnDeleteMiss',
    'OnConflict',
]
