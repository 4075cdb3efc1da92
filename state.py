import struct

PGRAPH_BASE = 0x400000
PGRAPH_SIZE = 0x2000

class NV2AState():

  def read_nv2a_device_memory_word(self, offset):
    raise NotImplementedError()


# PGRAPH state from a `<path>_pgraph.bin` dump; everything else reads as zero
class NV2AStateFromFile(NV2AState):

  def __init__(self, path):

    def _load(path, suffix):
      full_path = path + "_" + suffix
      try:
        with open(full_path, "rb") as f:
          return f.read()
      except FileNotFoundError:
        print("Failed to load '%s'" % full_path)
        return bytes([])

    self.pgraph = _load(path, "pgraph.bin")
    if len(self.pgraph) not in (0, PGRAPH_SIZE):
      print("Unexpected PGRAPH dump size 0x%X" % len(self.pgraph))

  def read_nv2a_device_memory_word(self, offset):
    assert((offset & 3) == 0)
    offset -= PGRAPH_BASE
    if offset < 0 or offset + 4 > len(self.pgraph):
      return 0x00000000
    return struct.unpack_from("<L", self.pgraph, offset)[0]
