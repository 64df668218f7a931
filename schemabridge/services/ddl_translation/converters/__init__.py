from .base_converter import BaseConverter
from .general_converter import GeneralDdlConverter
from .olap_converter import OlapDdlConverter

__all__ = ['BaseConverter', 'GeneralDdlConverter', 'OlapDdlConverter']
