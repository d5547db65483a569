#!/usr/bin/env python3
"""
Default configuration values for fastaseek
"""

DEFAULT_CONFIG = {
    'reader': {
        'strategy': 'auto',
        'header_marker': '>',
        'comment_marker': ';',
        'width_check_lines': 1000,
        'chunk_size': 65536,
        'stop_at_next_record': True,
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
}
