"""The five directory resolvers, leaves first."""

from pathresolvers.resolvers.log import LogDirResolver
from pathresolvers.resolvers.root import RootDirResolver
from pathresolvers.resolvers.temp import TempDirResolver
from pathresolvers.resolvers.vendor import VendorResolver
from pathresolvers.resolvers.www import WwwDirResolver

__all__ = [
    "LogDirResolver",
    "RootDirResolver",
    "TempDirResolver",
    "VendorResolver",
    "WwwDirResolver",
]
