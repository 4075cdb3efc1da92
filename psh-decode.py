#!/usr/bin/env python3

import sys

import state


path = sys.argv[1]
state = state.NV2AStateFromFile(path)


from decoders import textures
textures.dump(state)

from decoders import register_combiners
register_combiners.dump(state)
