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

from collections	import namedtuple
from typing		import Callable, NewType

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "AlgorithmTag", "TypedPrivateKey", "KeygenFunc", "KeyringOptions" )

AlgorithmTag			= NewType( 'AlgorithmTag', str )


class TypedPrivateKey:
    """A raw 32-byte private key, tagged with the signing algorithm whose keygen function built it.
    Immutable; the repr omits the key material.

    """
    __slots__			= ( '_algo', '_key' )

    def __init__( self, algo: AlgorithmTag, key: bytes ):
        object.__setattr__( self, '_algo', algo )
        object.__setattr__( self, '_key', bytes( key ))

    def __setattr__( self, name, value ):
        raise AttributeError( f"{self.__class__.__name__} is immutable" )

    @property
    def algo( self ) -> AlgorithmTag:
        return self._algo

    @property
    def key( self ) -> bytes:
        return self._key

    def __bytes__( self ):
        return self._key

    def __len__( self ):
        return len( self._key )

    def hex( self ) -> str:
        return self._key.hex()

    def __eq__( self, other ):
        if not isinstance( other, TypedPrivateKey ):
            return NotImplemented
        return self._algo == other._algo and self._key == other._key

    def __hash__( self ):
        return hash( (self._algo, self._key) )

    def __repr__( self ):
        return f"{self.__class__.__name__}({self._algo}: {len(self._key)*8}-bit)"


KeygenFunc			= Callable[[bytes, AlgorithmTag], TypedPrivateKey]

# What a keyring framework needs to host the supported signing algorithms
KeyringOptions			= namedtuple( 'KeyringOptions', ('keygen_func', 'derive_func', 'supported_algos', 'supported_algos_ledger') )
