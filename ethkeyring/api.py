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

import logging

from typing		import Optional, Tuple, Union

from .defaults		import ETH_SECP256K1
from .derive		import EthSecp256k1Strategy
from .registry		import Registry
from .types		import AlgorithmTag, KeyringOptions, TypedPrivateKey
from .util		import into_bytes

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "derive_key", "derive_secp256k1", "keygen", "supported_algorithms", "eth_secp256k1_options",
)

log				= logging.getLogger( __package__ )


def derive_key(
    mnemonic: str,
    passphrase: Optional[Union[str,bytes]],
    hd_path: Optional[str],
    algo: AlgorithmTag,
    registry: Optional[Registry] = None,  # Default: Registry.default()
    language: Optional[str]	= None,
) -> bytes:
    """Derive the raw 32-byte private key for the BIP-39 Mnemonic and passphrase, using the
    derivation strategy registered for the signing algorithm.

    The HD path is used by the standard secp256k1 algorithm only; eth_secp256k1 always produces the
    BIP-32 master key of the seed, regardless of any HD path supplied.

    """
    if registry is None:
        registry		= Registry.default()
    return registry.derive_key( mnemonic, passphrase, hd_path, algo, language=language )


def derive_secp256k1(
    mnemonic: str,
    passphrase: Optional[Union[str,bytes]] = None,
    hd_path: Optional[str]	= None,  # Ignored
    language: Optional[str]	= None,
) -> bytes:
    """Ethereum-compatible derivation of the secp256k1 private key for the BIP-39 Mnemonic."""
    return EthSecp256k1Strategy().derive( mnemonic, passphrase=passphrase, hd_path=hd_path, language=language )


def keygen(
    bz: Union[bytes,str],
    algo: AlgorithmTag,
    registry: Optional[Registry] = None,
) -> TypedPrivateKey:
    """Construct the typed private key from the raw (or hex) key bytes, using the keygen function
    registered for the signing algorithm.

    """
    if registry is None:
        registry		= Registry.default()
    return registry.keygen( into_bytes( bz ), algo )


def supported_algorithms(
    registry: Optional[Registry] = None,
    ledger: bool		= False,
) -> Tuple[AlgorithmTag, ...]:
    if registry is None:
        registry		= Registry.default()
    if ledger:
        return registry.supported_algorithms_ledger()
    return registry.supported_algorithms()


def eth_secp256k1_options(
    registry: Optional[Registry] = None,
) -> KeyringOptions:
    """The keyring options for hosting the Ethereum secp256k1 signing algorithm: keys are constructed
    only as eth_secp256k1, while derivation dispatches over every registered signing algorithm.

    """
    if registry is None:
        registry		= Registry.default()
    return KeyringOptions(
        keygen_func		= registry.resolve( ETH_SECP256K1 ).keygen,
        derive_func		= registry.derive_key,
        supported_algos		= registry.supported_algorithms(),
        supported_algos_ledger	= registry.supported_algorithms_ledger(),
    )
