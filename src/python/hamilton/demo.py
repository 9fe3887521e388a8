"""
===============================================================================
HAMILTON - QUATERNION DEMO DRIVER
===============================================================================
Prints every derived quantity of two quaternions: parts, conjugate,
opposite, hash, clone and string round-trip checks, then sum, product,
difference, norm, inverse and both quotients.

USAGE:
    python -m hamilton                                # operands from config
    python -m hamilton 12-34i+1j+5k                   # override first operand
    python -m hamilton 12-34i+1j+5k 1-2i-1j+2k        # override both
    python -m hamilton --config my.yaml --log-level DEBUG
    hamilton-demo ...                                 # installed script

The default configuration, demo_config.yaml, ships inside the package.

EXIT STATUS:
    0 on success, 1 if an operand is malformed or a division hits zero.
===============================================================================
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from hamilton.errors import DivisionError, FormatError
from hamilton.quaternion import Quaternion

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'demo_config.yaml'

DEFAULT_CONFIG = {
    'demo': {
        'first': '12.0-34.0i+1.0j+5.0k',
        'second': '1.0-2.0i-1.0j+2.0k',
    },
    'logging': {
        'level': 'INFO',
    },
}


def load_config(config_path: Optional[str] = None) -> dict:
    """
    Load demo configuration from YAML file.

    Sections missing from the file keep the values in DEFAULT_CONFIG.

    Args:
        config_path: Path to YAML config. Defaults to the packaged demo_config.yaml;
            if that bundled file is absent the built-in defaults are used.

    Returns:
        Dictionary with 'demo' and 'logging' sections
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.warning(f"No config at {DEFAULT_CONFIG_PATH}, using defaults")
            return {k: dict(v) for k, v in DEFAULT_CONFIG.items()}
        config_path = str(DEFAULT_CONFIG_PATH)

    logger.info(f"Loading configuration from: {config_path}")
    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}

    config = {}
    for section, defaults in DEFAULT_CONFIG.items():
        config[section] = dict(defaults)
        config[section].update(loaded.get(section) or {})
    return config


def setup_logging(level: str) -> None:
    """Configure root logging for the demo run."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_report(first: Quaternion, second: Quaternion) -> List[Tuple[str, object]]:
    """
    Compute the labelled demo rows for two operands.

    Raises DivisionError if an inverse or quotient needs a zero operand.
    """
    clone = first.clone()
    rows = [
        ('first', first),
        ('real', first.real),
        ('imagi', first.i_part),
        ('imagj', first.j_part),
        ('imagk', first.k_part),
        ('isZero', first.is_zero()),
        ('conjugate', first.conjugate()),
        ('opposite', first.opposite()),
        ('hashCode', hash(first)),
        ('clone equals to original', clone == first),
        ('clone is not the same object', clone is not first),
        ('string conversion equals to original',
         Quaternion.value_of(str(first)) == first),
        ('second', second),
        ('hashCode', hash(second)),
        ('equals', first == second),
        ('plus', first.plus(second)),
        ('times', first.times(second)),
        ('minus', first.minus(second)),
        ('norm', first.norm),
        ('dotMult', first.dot_mult(second)),
        ('inverse', first.inverse()),
        ('divideByRight', first.divide_by_right(second)),
        ('divideByLeft', first.divide_by_left(second)),
    ]
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point. Parses command line arguments and prints the report.
    """
    parser = argparse.ArgumentParser(
        description='Quaternion arithmetic demo',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m hamilton                     Operands from config
  python -m hamilton -- -1-2i+3j-4.5k    Negative real part needs "--"
        """
    )

    parser.add_argument('first', nargs='?', default=None,
                        help='First quaternion literal (a+bi+cj+dk)')
    parser.add_argument('second', nargs='?', default=None,
                        help='Second quaternion literal (a+bi+cj+dk)')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to demo config YAML')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (overrides config)')

    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(args.log_level or config['logging']['level'])

    first_text = args.first or config['demo']['first']
    second_text = args.second or config['demo']['second']

    try:
        first = Quaternion.value_of(first_text)
        second = Quaternion.value_of(second_text)
        rows = build_report(first, second)
    except FormatError as e:
        logger.error(f"Malformed quaternion literal: {e}")
        return 1
    except DivisionError as e:
        logger.error(f"Division failed: {e}")
        return 1

    for label, value in rows:
        print(f"{label}: {value}")

    logger.info("Demo complete")
    return 0


if __name__ == '__main__':
    sys.exit(main())
