"""Redis key prefixes."""

STATE_KEY_PREFIX = "basalam:oauth:state:"
SESSION_KEY_PREFIX = "basalam:session:"
