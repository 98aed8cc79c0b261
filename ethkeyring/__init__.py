#
# Python-ethkeyring -- Multi-algorithm BIP-39 Key Derivation and Signing Algorithm Registry
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-ethkeyring is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-ethkeyring is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
from __future__		import annotations

from .version		import __version__			# noqa F401
from .api		import *				# noqa F403
from .api		import __all__ as api_all
from .defaults		import SECP256K1, ETH_SECP256K1, PATH_DEFAULT	# noqa F401
from .derive		import *				# noqa F403
from .derive		import __all__ as derive_all
from .errors		import *				# noqa F403
from .errors		import __all__ as errors_all
from .registry		import *				# noqa F403
from .registry		import __all__ as registry_all
from .seed		import generate_seed, produce_mnemonic	# noqa F401
from .types		import *				# noqa F403
from .types		import __all__ as types_all

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= api_all + derive_all + errors_all + registry_all + types_all + (
    "SECP256K1", "ETH_SECP256K1", "PATH_DEFAULT", "generate_seed", "produce_mnemonic",
)
