'''Human readable IDs for Django.

Turns numeric keys into short IDs over a configurable alphabet, padded,
grouped for readability and protected by checksum symbols, and turns them
back into numbers. Configure the shared converter through the ``HRID_*``
settings, or build your own `HumanID` or `Codec`.

'''
from hrid.codec import Codec
from hrid.ids import HumanID, get_default, to_number, to_string
