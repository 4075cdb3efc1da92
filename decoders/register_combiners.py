import psh
from psh.decode import texture_modes

from decoders import textures

NV_PGRAPH_COMBINEFACTOR0 = 0x401880
NV_PGRAPH_COMBINEFACTOR1 = 0x4018A0
NV_PGRAPH_COMBINEALPHAI = 0x4018C0
NV_PGRAPH_COMBINEALPHAO = 0x4018E0
NV_PGRAPH_COMBINECOLORI = 0x401900
NV_PGRAPH_COMBINECOLORO = 0x401920
NV_PGRAPH_COMBINECTL = 0x401940
NV_PGRAPH_COMBINESPECFOG0 = 0x401944
NV_PGRAPH_COMBINESPECFOG1 = 0x401948
NV_PGRAPH_SHADERCTL = 0x401998
NV_PGRAPH_SHADERPROG = 0x40199C
NV_PGRAPH_SPECFOGFACTOR0 = 0x4019AC
NV_PGRAPH_SPECFOGFACTOR1 = 0x4019B0


# Arguments for `psh.translate`, read from PGRAPH
def read_inputs(state):

  def _read_array(base):
    return [state.read_nv2a_device_memory_word(base + i * 4) for i in range(8)]

  return (state.read_nv2a_device_memory_word(NV_PGRAPH_COMBINECTL),
          state.read_nv2a_device_memory_word(NV_PGRAPH_SHADERPROG),
          state.read_nv2a_device_memory_word(NV_PGRAPH_SHADERCTL),
          _read_array(NV_PGRAPH_COMBINECOLORI),
          _read_array(NV_PGRAPH_COMBINECOLORO),
          _read_array(NV_PGRAPH_COMBINEALPHAI),
          _read_array(NV_PGRAPH_COMBINEALPHAO),
          state.read_nv2a_device_memory_word(NV_PGRAPH_COMBINESPECFOG0),
          state.read_nv2a_device_memory_word(NV_PGRAPH_COMBINESPECFOG1),
          textures.get_rect_flags(state))

def get_constant_register(name):
  # c_<stage>_<index>
  _, stage, index = name.split("_")
  stage = int(stage)
  index = int(index)
  if stage == 8:
    return (NV_PGRAPH_SPECFOGFACTOR0, NV_PGRAPH_SPECFOGFACTOR1)[index]
  base = (NV_PGRAPH_COMBINEFACTOR0, NV_PGRAPH_COMBINEFACTOR1)[index]
  return base + stage * 4

def get_rgba(combinefactor):
  r = (combinefactor >> 16) & 0xFF
  g = (combinefactor >> 8) & 0xFF
  b = (combinefactor >> 0) & 0xFF
  a = (combinefactor >> 24) & 0xFF
  return (r, g, b, a)

def get_rgba_string(combinefactor):
  r, g, b, a = get_rgba(combinefactor)
  return "vec4(%s, %s, %s, %s); // (0x%02X, 0x%02X, 0x%02X, 0x%02X)" % \
          (r/255.0, g/255.0, b/255.0, a/255.0, r, g, b, a)

def dump(state):
  print("\nRegister combiners:")

  inputs = read_inputs(state)
  program = psh.decode_program(*inputs)

  print("Stages: %d" % program.num_stages)
  print("Mux: %s" % ("MSB" if program.mux_msb else "LSB"))
  print("C0: %s" % ("unique per-stage" if program.unique_c0 else "same in each stage"))
  print("C1: %s" % ("unique per-stage" if program.unique_c1 else "same in each stage"))

  for i in range(4):
    mode = program.tex_modes[i]
    mode_str = texture_modes[mode] if mode < len(texture_modes) else "<invalid:0x%X>" % mode
    print("[%d] %s%s; input texture %d" % (i, mode_str, " (rect)" if program.rect_tex[i] else "", program.input_tex[i]))

  final = program.final
  if final.enabled:
    print("Final combiner: clamp-sum: %d; invert-v1: %d; invert-r0: %d" % (final.clamp_sum, final.invert_v1, final.invert_r0))
  else:
    print("Final combiner: disabled")

  context = psh.emit_program(program)

  print("")
  print(psh.assemble(context))

  for name in context.const_refs:
    combinefactor = state.read_nv2a_device_memory_word(get_constant_register(name))
    print("%s = %s" % (name, get_rgba_string(combinefactor)))

  print("")
