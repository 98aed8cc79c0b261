import os

from setuptools import setup

#
# All platforms
#
HERE				= os.path.dirname( os.path.abspath( __file__ ))

install_requires		= list(
    # Remove whitespace, elide blank lines and comments
    ''.join( r.split() )
    for r in open( os.path.join( HERE, "requirements.txt" )).readlines()
    if r.strip() and not r.strip().startswith( '#' )
)
tests_require			= list(
    ''.join( r.split() )
    for r in open( os.path.join( HERE, "requirements-tests.txt" )).readlines()
    if r.strip() and not r.strip().startswith( '#' )
)

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':		tests_require,
}

# Must work if setup.py is run in the source distribution context, or from
# within the packaged distribution directory.
__version__			= None
try:
    exec( open( os.path.join( HERE, 'ethkeyring', 'version.py' ), 'r' ).read() )
except FileNotFoundError:
    exec( open( os.path.join( HERE, 'version.py' ), 'r' ).read() )

console_scripts			= [
    'ethkeyring-cli	= ethkeyring.cli:cli',
]

entry_points			= {
    'console_scripts': 		console_scripts,
}

package_dir			= {
    "ethkeyring":		"./ethkeyring",
    "ethkeyring.cli":		"./ethkeyring/cli",
}

long_description_content_type	= 'text/markdown'
long_description		= """\
Derive the raw secp256k1 private key for a BIP-39 Mnemonic phrase (and optional passphrase),
using one of several signing algorithms:

- secp256k1:      Standard BIP-32 HD derivation along the supplied path (default m/44'/60'/0'/0/0)
- eth_secp256k1:  Ethereum-compatible; the BIP-32 master key of the seed (any HD path is ignored)

A Registry of the supported signing algorithms supplies each algorithm's derivation strategy
and its keygen function, which refuses to construct a key for any other algorithm.

    $ ethkeyring-cli algorithms
    [
        "eth_secp256k1",
        "secp256k1"
    ]
    $ echo "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about" \\
        | ethkeyring-cli --no-json derive --algo secp256k1
    1ab42cc412b618bdea3a599e3c9bae199ebf030895b039e9db1e30dafb12b727

NOTE: eth_secp256k1 ignores the HD path; one Mnemonic yields exactly one key.  Multiple accounts
per Mnemonic require the standard secp256k1 algorithm.

NOTE: the standard secp256k1 path handling is more lenient than the reference keyring's, which
rejects all of these: the leading "m/" is optional, h or H mark hardened indices as well as ', and an
empty path means the default m/44'/60'/0'/0/0.  Paths are always reported in canonical m/44'/... form.
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Topic :: Security :: Cryptography",
]

setup(
    name			= "ethkeyring",
    version			= __version__,
    install_requires		= install_requires,
    tests_require		= tests_require,
    extras_require		= extras_require,
    packages			= package_dir.keys(),
    package_dir			= package_dir,
    include_package_data	= True,
    zip_safe			= True,
    entry_points		= entry_points,
    author			= "Perry Kundert",
    author_email		= "perry@dominionrnd.com",
    description			= "Multi-algorithm BIP-39 Mnemonic key derivation and signing algorithm registry",
    long_description		= long_description,
    long_description_content_type = long_description_content_type,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "Ethereum Cosmos Tendermint secp256k1 BIP-39 BIP-32 keyring key derivation",
    classifiers			= classifiers,
    python_requires		= ">=3.9",
)
