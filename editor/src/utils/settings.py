"""Editor settings loaded from the user's JSON config file.

Missing files and missing keys fall back to the defaults in constants.py.
"""

import os
import json
import logging

from constants import (
	POINT_WIDTH, LIMITS_MIN_SIZE, IN_POINT_COLOR, OUT_POINT_COLOR,
	LIMITS_COLOR, MIN_SCALE_FACTOR, MAX_SCALE_FACTOR,
	CONFIG_DIR_NAME, CONFIG_FILE_NAME
)
from utils.logger import loggerRaise

_logger = logging.getLogger('Settings')

DEFAULT_SETTINGS = {
	'point_width': POINT_WIDTH,
	'limits_min_size': LIMITS_MIN_SIZE,
	'in_point_color': IN_POINT_COLOR,
	'out_point_color': OUT_POINT_COLOR,
	'limits_color': LIMITS_COLOR,
	'min_scale_factor': MIN_SCALE_FACTOR,
	'max_scale_factor': MAX_SCALE_FACTOR,
}

_NUMERIC_KEYS = ('point_width', 'limits_min_size', 'min_scale_factor', 'max_scale_factor')


def default_config_file():
	"""Path of the config file in the user's home directory"""
	return os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def load_settings(config_file=None):
	"""Load settings, overriding defaults with the config file values
	
	Args:
		config_file: Path of the JSON config file (default: user config)
		
	Returns:
		dict: Complete settings
		
	Raises:
		ValueError: If the file is not valid JSON or holds invalid values
		TypeError: If a numeric setting is not a number
	"""
	settings = dict(DEFAULT_SETTINGS)
	config_file = config_file or default_config_file()
	if not os.path.exists(config_file):
		return settings
	
	try:
		with open(config_file, 'r', encoding='utf-8') as f:
			config = json.load(f)
		if not isinstance(config, dict):
			raise ValueError(f"Config file {config_file} must contain a JSON object")
		
		for key, value in config.items():
			if key not in DEFAULT_SETTINGS:
				_logger.warning(f"Ignoring unknown setting '{key}' in {config_file}")
				continue
			if key in _NUMERIC_KEYS:
				value = float(value)
				if value <= 0:
					raise ValueError(f"Setting '{key}' must be positive, got {value}")
			settings[key] = value
		
		if settings['min_scale_factor'] > settings['max_scale_factor']:
			raise ValueError("min_scale_factor must not exceed max_scale_factor")
	except (OSError, ValueError, TypeError) as e:
		loggerRaise(e, f"Error loading settings from {config_file}")
	
	return settings
