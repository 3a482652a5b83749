from cssblocks.validation.combinators import assert_valid_combinators
from cssblocks.validation.state_args import BLOCK_PSEUDO, STATE_PSEUDO, parse_state

__all__ = ["assert_valid_combinators", "parse_state", "BLOCK_PSEUDO", "STATE_PSEUDO"]
