import nacl.utils


randombytes = nacl.utils.random
