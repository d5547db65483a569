#!/usr/bin/env python3
"""
Configuration schema definition for validation
"""
from typing import Dict, Any, List


class ConfigSchema:
    """Configuration schema for validation"""

    SCHEMA = {
        'reader': {
            'strategy': {'type': str, 'required': True,
                         'choices': ('fixed', 'scan', 'auto')},
            'header_marker': {'type': str, 'required': True},
            'comment_marker': {'type': str, 'required': True},
            'width_check_lines': {'type': int, 'required': False},
            'chunk_size': {'type': int, 'required': False},
            'stop_at_next_record': {'type': bool, 'required': False},
        },
        'logging': {
            'level': {'type': str, 'required': False},
            'format': {'type': str, 'required': False},
            'log_dir': {'type': str, 'required': False},
        },
    }

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> List[str]:
        """Validate configuration against schema

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        # Check required fields
        for section, fields in cls.SCHEMA.items():
            if any(props.get('required', False) for _, props in fields.items()):
                if section not in config:
                    errors.append(f"Missing required configuration section: {section}")
                    continue

            if section not in config:
                continue

            section_config = config[section]
            if not isinstance(section_config, dict):
                errors.append(f"Configuration section {section} must be a mapping")
                continue

            for field, props in fields.items():
                if props.get('required', False) and field not in section_config:
                    errors.append(f"Missing required configuration field: {section}.{field}")

        # Validate field types and choices
        for section, fields in cls.SCHEMA.items():
            section_config = config.get(section)
            if not isinstance(section_config, dict):
                continue

            for field, props in fields.items():
                if field not in section_config:
                    continue
                value = section_config[field]
                expected_type = props['type']
                # bool is a subclass of int
                if not isinstance(value, expected_type) or (expected_type is int and isinstance(value, bool)):
                    errors.append(
                        f"Invalid type for {section}.{field}: expected {expected_type.__name__}, "
                        f"got {type(value).__name__}"
                    )
                    continue
                choices = props.get('choices')
                if choices and value not in choices:
                    errors.append(
                        f"Invalid value for {section}.{field}: {value!r} (expected one of {', '.join(choices)})"
                    )

        return errors
