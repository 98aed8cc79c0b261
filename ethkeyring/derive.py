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

import hashlib
import hmac
import logging

from typing		import Optional, Sequence, Tuple, Union

import eth_account
import hdwallet

from .defaults		import (
    SECP256K1, ETH_SECP256K1, PURPOSE, COIN_TYPE, PATH_DEFAULT, HARDENED,
    SEED_HMAC_KEY, SECP256K1_N, PRIVATE_KEY_BYTES,
)
from .errors		import InvalidPath, InvalidScalar, SeedExpansionFailed
from .seed		import generate_seed
from .types		import AlgorithmTag

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "DerivationStrategy", "StandardStrategy", "EthSecp256k1Strategy",
    "hd_path", "hd_path_parse", "hd_path_format", "seed_expand", "private_key_normalize",
)

log				= logging.getLogger( __package__ )


def hd_path(
    coin_type: int		= COIN_TYPE,
    account: int		= 0,
    change: bool		= False,
    index: int			= 0,
    purpose: int		= PURPOSE,
) -> str:
    """Produce a BIP-44 derivation path, eg. "m/44'/60'/0'/0/0" for the first Ethereum account."""
    return hd_path_format( hd_path_parse( f"m/{purpose}'/{coin_type}'/{account}'/{int( bool( change ))}/{index}" ))


def hd_path_parse(
    path: str,
) -> Tuple[int, ...]:
    """Parse a BIP-32 derivation path into its indices; hardened indices are offset by 2^31.  The
    leading "m/" is optional (eg. "44'/60'/0'/0/0" is accepted), and an empty path ("m", "m/")
    designates the master key.  Hardened segments may be marked with ', h or H.

    """
    if not isinstance( path, str ):
        raise InvalidPath( f"HD derivation path must be a str, not {type( path ).__name__}", path=path )
    segs			= path.strip().split( '/' )
    if segs[0] == 'm':
        segs			= segs[1:]
    if segs and segs[-1] == '':
        segs			= segs[:-1]  # Trailing '/', eg. just "m/"
    indices			= []
    for seg in segs:
        hardened		= seg[-1:] in ( "'", "h", "H" )
        num			= seg[:-1] if hardened else seg
        if not ( num.isascii() and num.isdigit() ):
            raise InvalidPath( f"Unrecognized HD derivation path segment {seg!r} in {path!r}", path=path )
        index			= int( num )
        if index >= HARDENED:
            raise InvalidPath( f"HD derivation path index {index} in {path!r} exceeds {HARDENED-1}", path=path )
        indices.append( index + HARDENED if hardened else index )
    return tuple( indices )


def hd_path_format(
    indices: Sequence[int],
) -> str:
    return "m/" + '/'.join(
        f"{i - HARDENED}'" if i >= HARDENED else f"{i}"
        for i in indices
    )


def seed_expand(
    seed: bytes,
) -> bytes:
    """HMAC-SHA512 the seed w/ the BIP-32 "Bitcoin seed" key, producing the 64-byte master private
    key and chain code.

    """
    try:
        mac			= hmac.new( SEED_HMAC_KEY, digestmod=hashlib.sha512 )
        mac.update( seed )
    except ( TypeError, ValueError ) as exc:
        raise SeedExpansionFailed(
            f"HMAC-SHA512 could not consume a {type( seed ).__name__} seed: {exc}", algo=ETH_SECP256K1
        ) from exc
    return mac.digest()


def private_key_normalize(
    candidate: bytes,
    algo: AlgorithmTag		= ETH_SECP256K1,
) -> bytes:
    """Confirm the candidate is a valid secp256k1 private key in [1,N), and re-serialize it through the
    canonical Ethereum private key representation.

    """
    if len( candidate ) != PRIVATE_KEY_BYTES:
        raise InvalidScalar( f"{algo} private key must be {PRIVATE_KEY_BYTES} bytes, not {len( candidate )}", algo=algo )
    if not 0 < int.from_bytes( candidate, 'big' ) < SECP256K1_N:
        raise InvalidScalar( f"{algo} private key is not a valid secp256k1 scalar", algo=algo )
    try:
        account			= eth_account.Account.from_key( candidate )
    except Exception as exc:
        raise InvalidScalar( f"{algo} private key rejected: {exc}", algo=algo ) from exc
    return bytes( account.key )


class DerivationStrategy:
    """Derives a 32-byte private key scalar from a BIP-39 Mnemonic (or its 512-bit seed), and an
    optional HD derivation path.  Strategies hold no mutable state; one instance may be shared by
    any number of concurrent callers.

    """
    algo: AlgorithmTag		= None

    def derive_seed( self, seed: bytes, hd_path: Optional[str] = None ) -> bytes:
        raise NotImplementedError()

    def derivation_path( self, hd_path: Optional[str] = None ) -> Optional[str]:
        """The HD path actually used for the supplied hd_path, or None if the strategy ignores it."""
        return None

    def derive(
        self,
        mnemonic: str,
        passphrase: Optional[Union[str,bytes]] = None,
        hd_path: Optional[str]	= None,
        language: Optional[str]	= None,
    ) -> bytes:
        seed			= generate_seed( mnemonic, passphrase=passphrase, language=language )
        return self.derive_seed( seed, hd_path )

    def __repr__( self ):
        return f"{self.__class__.__name__}({self.algo})"


class StandardStrategy( DerivationStrategy ):
    """Standard BIP-32 hierarchical derivation along the supplied HD path, using python-hdwallet.
    No path (None or "") uses the default path; "m/" yields the master key itself.

    More lenient than the reference keyring's standard derivation, which requires the "m/" prefix,
    only ' hardened markers and a non-empty path; here the prefix is optional, h or H also mark
    hardened indices, and an empty path means path_default (m/44'/60'/0'/0/0).

    """
    algo			= SECP256K1

    def __init__( self, path_default: str = PATH_DEFAULT, symbol: str = "ETH" ):
        hd_path_parse( path_default )
        self.path_default	= path_default
        self.symbol		= symbol

    def derivation_path( self, hd_path: Optional[str] = None ) -> str:
        return hd_path_format( hd_path_parse( hd_path or self.path_default ))

    def derive_seed( self, seed: bytes, hd_path: Optional[str] = None ) -> bytes:
        if not isinstance( seed, (bytes, bytearray) ):
            raise SeedExpansionFailed( f"{self.algo} seed must be bytes, not {type( seed ).__name__}", algo=self.algo )
        path			= self.derivation_path( hd_path )
        wallet			= hdwallet.HDWallet( symbol=self.symbol )
        wallet.from_seed( bytes( seed ).hex() )
        # Valid HD wallet derivation paths always start with "m/"; just "m/" leaves the master key
        if len( path ) > 2:
            wallet.from_path( path )
        log.info( f"Derived {self.algo} private key at {path}" )
        return private_key_normalize( bytes.fromhex( wallet.private_key() ), algo=self.algo )


class EthSecp256k1Strategy( DerivationStrategy ):
    """Ethereum-compatible derivation: the BIP-32 master private key of the seed is used directly;
    the chain code is discarded and no hierarchical derivation is performed.  Any HD path supplied
    is accepted, but has no effect: the same Mnemonic and passphrase always yield the same key.

    """
    algo			= ETH_SECP256K1

    def derive_seed( self, seed: bytes, hd_path: Optional[str] = None ) -> bytes:
        expanded		= seed_expand( seed )
        if hd_path:
            log.debug( f"Ignoring HD path {hd_path} for {self.algo} derivation" )
        log.info( f"Derived {self.algo} private key from {len( seed )*8}-bit seed" )
        return private_key_normalize( expanded[:PRIVATE_KEY_BYTES], algo=self.algo )
