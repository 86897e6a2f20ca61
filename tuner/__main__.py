import logging
import sys

import tuner.driver
import tuner.midi_utils
import tuner.notes


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main () -> int:

	"""
	Main entry point for the tuner read loop.
	"""

	try:
		config = tuner.driver.config_from_dict(tuner.driver.load_config())

	except ValueError as e:
		logger.error(f"Invalid configuration: {e}")
		return 1

	midi_out = None

	if config.device_name is not None:
		midi_out = tuner.midi_utils.open_output_device(config.device_name)

	try:
		tuner.driver.run(config, sys.stdin, sys.stdout, sys.stderr, midi_out=midi_out)

	except tuner.notes.InvalidNoteNameError as e:
		logger.error(str(e))
		return 1

	except KeyboardInterrupt:
		logger.info("Stopping...")

	finally:
		if midi_out is not None:
			midi_out.close()

	return 0


if __name__ == "__main__":
	sys.exit(main())
