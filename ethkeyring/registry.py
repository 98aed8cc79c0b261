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
import types

from collections	import namedtuple
from functools		import wraps
from typing		import Optional, Sequence, Tuple, Union

from .defaults		import ETH_SECP256K1, SECP256K1, ALGORITHMS, ALGORITHMS_LEDGER, PRIVATE_KEY_BYTES
from .derive		import DerivationStrategy, StandardStrategy, EthSecp256k1Strategy
from .errors		import AlgorithmMismatch, InvalidScalar, UnsupportedAlgorithm
from .types		import AlgorithmTag, KeygenFunc, TypedPrivateKey
from .util		import commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "Algorithm", "Registry", "keygen_for", "keygen_eth_secp256k1", "keygen_secp256k1",
)

log				= logging.getLogger( __package__ )


Algorithm			= namedtuple( 'Algorithm', ('algo', 'strategy', 'keygen') )


def keygen_for( algo: AlgorithmTag ) -> KeygenFunc:
    """Produce a keygen function bound to the one signing algorithm it will construct keys for.  The
    resultant keygen( bz, algo ) refuses any other algorithm with AlgorithmMismatch, and performs no
    cryptographic transformation of the (already derived) private key bytes.

    """
    def keygen( bz: bytes, received: AlgorithmTag ) -> TypedPrivateKey:
        if received != algo:
            raise AlgorithmMismatch( expected=algo, received=received )
        if len( bz ) != PRIVATE_KEY_BYTES:
            raise InvalidScalar( f"{algo} private key must be {PRIVATE_KEY_BYTES} bytes, not {len( bz )}", algo=algo )
        return TypedPrivateKey( algo, bz )
    keygen.__name__		= f"keygen_{algo}"
    keygen.__qualname__		= keygen.__name__
    keygen.algo			= algo
    return keygen


keygen_eth_secp256k1		= keygen_for( ETH_SECP256K1 )
keygen_secp256k1		= keygen_for( SECP256K1 )


def resolving( method ):
    """Decorate Registry methods taking a trailing algo, logging any unsupported signing algorithm."""
    @wraps( method )
    def wrapper( self, *args, **kwds ):
        try:
            return method( self, *args, **kwds )
        except UnsupportedAlgorithm as exc:
            log.warning( f"{method.__name__}: {exc}; specify {commas( self.supported_algorithms(), final='or' )}" )
            raise
    return wrapper


class Registry:
    """The closed set of supported signing algorithms, each w/ its DerivationStrategy and keygen
    function.  Built once, and read-only thereafter; safe to share between threads.  Registration
    order is preserved, for presenting choices.

    Pass a Registry explicitly to whatever keyring context needs it; there is no process-wide
    registration.

    """
    def __init__(
        self,
        algorithms: Sequence[Union[Algorithm, Tuple[AlgorithmTag, DerivationStrategy, KeygenFunc]]],
        ledger: Optional[Sequence[AlgorithmTag]] = None,  # Algorithms supported by hardware signers (default: all)
    ):
        entries			= {}
        for entry in algorithms:
            entry		= Algorithm( *entry )
            if entry.algo in entries:
                raise ValueError( f"Signing algorithm {entry.algo} registered more than once" )
            if entry.strategy.algo != entry.algo:
                raise ValueError( f"Signing algorithm {entry.algo} registered w/ {entry.strategy!r}" )
            entries[entry.algo]	= entry
        if not entries:
            raise ValueError( "At least one signing algorithm must be registered" )
        if ledger is None:
            ledger		= tuple( entries )
        unknown			= [ algo for algo in ledger if algo not in entries ]
        if unknown:
            raise ValueError( f"Ledger signing algorithms {commas( unknown )} are not registered" )
        self._algorithms	= types.MappingProxyType( entries )
        self._ledger		= tuple( ledger )
        log.debug( f"Registered signing algorithms {commas( self._algorithms )} (Ledger: {commas( self._ledger )})" )

    @classmethod
    def default( cls ) -> Registry:
        """The standard registry: eth_secp256k1 (Ethereum) and secp256k1 (Tendermint)."""
        strategies		= dict(
            ( strategy.algo, strategy )
            for strategy in ( EthSecp256k1Strategy(), StandardStrategy() )
        )
        return cls(
            [
                Algorithm( algo, strategies[algo], keygen_for( algo ))
                for algo in ALGORITHMS
            ],
            ledger	= ALGORITHMS_LEDGER,
        )

    def __contains__( self, algo ):
        try:
            return algo in self._algorithms
        except TypeError:
            return False  # unhashable; never a signing algorithm

    def __iter__( self ):
        return iter( self._algorithms.values() )

    def __len__( self ):
        return len( self._algorithms )

    def __repr__( self ):
        return f"{self.__class__.__name__}({commas( self._algorithms )})"

    def resolve( self, algo: AlgorithmTag ) -> Algorithm:
        """Return the Algorithm (algo, strategy, keygen) registered for the signing algorithm, or
        raise UnsupportedAlgorithm; never substitutes a default.

        """
        try:
            return self._algorithms[algo]
        except ( KeyError, TypeError ) as exc:
            raise UnsupportedAlgorithm( algo ) from exc

    def supported_algorithms( self ) -> Tuple[AlgorithmTag, ...]:
        return tuple( self._algorithms )

    def supported_algorithms_ledger( self ) -> Tuple[AlgorithmTag, ...]:
        return self._ledger

    @resolving
    def derive_key(
        self,
        mnemonic: str,
        passphrase: Optional[Union[str,bytes]],
        hd_path: Optional[str],
        algo: AlgorithmTag,
        language: Optional[str]	= None,
    ) -> bytes:
        return self.resolve( algo ).strategy.derive( mnemonic, passphrase=passphrase, hd_path=hd_path, language=language )

    @resolving
    def keygen( self, bz: bytes, algo: AlgorithmTag ) -> TypedPrivateKey:
        return self.resolve( algo ).keygen( bz, algo )
