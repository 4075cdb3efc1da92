#FIXME: Add the remaining linear (LU_IMAGE) formats
linear_color_formats = (
  0x10, # LU_IMAGE_A1R5G5B5
  0x11, # LU_IMAGE_R5G6B5
  0x12, # LU_IMAGE_A8R8G8B8
  0x13, # LU_IMAGE_Y8
  0x1C, # LU_IMAGE_X1R5G5B5
  0x1D, # LU_IMAGE_A4R4G4B4
  0x1E  # LU_IMAGE_X8R8G8B8
)

def get_color_format(state, i):
  fmt = state.read_nv2a_device_memory_word(0x401A04 + i * 4) # NV_PGRAPH_TEXFMT0
  return (fmt >> 8) & 0x7F

def is_enabled(state, i):
  ctl0 = state.read_nv2a_device_memory_word(0x4019CC + i * 4) # NV_PGRAPH_TEXCTL0_0
  return bool((ctl0 >> 30) & 1)

def is_rect(state, i):
  # Linear textures use unnormalized coordinates
  return is_enabled(state, i) and get_color_format(state, i) in linear_color_formats

def get_rect_flags(state):
  return [is_rect(state, i) for i in range(4)]

def dump(state):
  print("\nTexture Units:")
  for i in range(4):
    fmt_color = get_color_format(state, i)
    print("[%d] %s; format 0x%X%s" % (i, "enabled" if is_enabled(state, i) else "disabled",
                                     fmt_color, " (linear)" if is_rect(state, i) else ""))
  print("")
