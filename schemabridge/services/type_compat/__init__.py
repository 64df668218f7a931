from .checker import check
from .mapping import auto_map, check_mappings, format_mapping_text, parse_mapping_text

__all__ = ['auto_map', 'check', 'check_mappings', 'format_mapping_text', 'parse_mapping_text']
