# Decoding of the packed register combiner words.
#
# Nothing in here rejects a bit pattern; out-of-domain values are caught when
# the program is emitted.

from collections import namedtuple

# Registers
REGISTER_ZERO = 0x0 # r
REGISTER_DISCARD = 0x0 # w
REGISTER_C0 = 0x1
REGISTER_C1 = 0x2
REGISTER_FOG = 0x3
REGISTER_V0 = 0x4
REGISTER_V1 = 0x5
REGISTER_T0 = 0x8
REGISTER_T1 = 0x9
REGISTER_T2 = 0xA
REGISTER_T3 = 0xB
REGISTER_R0 = 0xC
REGISTER_R1 = 0xD
REGISTER_V1R0_SUM = 0xE # Only for final combiner (B, C, D)
REGISTER_EF_PROD = 0xF # Only for final combiner (A, B, C, D)

# Channels
CHANNEL_RGB = 0 # Blue when used as alpha source
CHANNEL_ALPHA = 1

# Input mappings
INPUTMAPPING_UNSIGNED_IDENTITY = 0x0 # max(0,x)
INPUTMAPPING_UNSIGNED_INVERT = 0x1 # 1 - max(0,x)
INPUTMAPPING_EXPAND_NORMAL = 0x2 # 2*max(0,x) - 1
INPUTMAPPING_EXPAND_NEGATE = 0x3 # 1 - 2*max(0,x)
INPUTMAPPING_HALFBIAS_NORMAL = 0x4 # max(0,x) - 1/2
INPUTMAPPING_HALFBIAS_NEGATE = 0x5 # 1/2 - max(0,x)
INPUTMAPPING_SIGNED_IDENTITY = 0x6 # x
INPUTMAPPING_SIGNED_NEGATE = 0x7 # -x

# Output mappings (bias in bit 0, scale in bits 1-2)
OUTPUT_IDENTITY = 0x0 # y = x
OUTPUT_BIAS = 0x1 # y = x - 0.5
OUTPUT_SHIFTLEFT_1 = 0x2 # y = x*2
OUTPUT_SHIFTLEFT_1_BIAS = 0x3 # y = (x - 0.5)*2
OUTPUT_SHIFTLEFT_2 = 0x4 # y = x*4
OUTPUT_SHIFTRIGHT_1 = 0x6 # y = x/2

# Texture modes
TEXTUREMODES_NONE = 0x00
TEXTUREMODES_PROJECT2D = 0x01
TEXTUREMODES_PROJECT3D = 0x02
TEXTUREMODES_CUBEMAP = 0x03
TEXTUREMODES_PASSTHRU = 0x04

texture_modes = (
  "NONE", #           0x00
  "PROJECT2D", #      0x01
  "PROJECT3D", #      0x02
  "CUBEMAP", #        0x03
  "PASSTHRU", #       0x04
  "CLIPPLANE", #      0x05
  "BUMPENVMAP", #     0x06
  "BUMPENVMAP_LUM", # 0x07
  "BRDF", #           0x08
  "DOT_ST", #         0x09
  "DOT_ZW", #         0x0A
  "DOT_RFLCT_DIFF", # 0x0B
  "DOT_RFLCT_SPEC", # 0x0C
  "DOT_STR_3D", #     0x0D
  "DOT_STR_CUBE", #   0x0E
  "DPNDNT_AR", #      0x0F
  "DPNDNT_GB", #      0x10
  "DOTPRODUCT", #     0x11
  "DOT_RFLCT_SPEC_CONST" # 0x12
)

MAX_STAGES = 8


InputSelector = namedtuple('InputSelector', ['reg', 'channel', 'modifier'])

OutputSpec = namedtuple('OutputSpec', [
  'cd', 'ab', 'muxsum',
  'cd_dot', 'ab_dot', 'mux',
  'mapping',
  'cd_blue_to_alpha', 'ab_blue_to_alpha'
])

CombinerStage = namedtuple('CombinerStage', ['rgb_input', 'rgb_output',
                                             'alpha_input', 'alpha_output'])

FinalCombiner = namedtuple('FinalCombiner', [
  'a', 'b', 'c', 'd', 'e', 'f', 'g',
  'clamp_sum', 'invert_v1', 'invert_r0',
  'enabled'
])


class ShaderProgram():
  # Everything one translation needs, decoded from the register words

  def __init__(self):
    self.num_stages = 0
    self.stages = []
    self.final = None
    self.tex_modes = [TEXTUREMODES_NONE] * 4
    self.rect_tex = [False] * 4
    self.input_tex = [-1, 0, 0, 0]
    self.unique_c0 = False
    self.unique_c1 = False
    self.mux_msb = False


def decode_input(value):
  return InputSelector(reg=(value >> 0) & 0xF,
                       channel=(value >> 4) & 1,
                       modifier=(value >> 5) & 0x7)

def decode_stage_inputs(word):
  a = decode_input((word >> 24) & 0xFF)
  b = decode_input((word >> 16) & 0xFF)
  c = decode_input((word >> 8) & 0xFF)
  d = decode_input((word >> 0) & 0xFF)
  return (a, b, c, d)

def decode_stage_output(word):
  flags = word >> 12
  return OutputSpec(cd=(word >> 0) & 0xF,
                    ab=(word >> 4) & 0xF,
                    muxsum=(word >> 8) & 0xF,
                    cd_dot=bool((flags >> 0) & 1),
                    ab_dot=bool((flags >> 1) & 1),
                    mux=bool((flags >> 2) & 1),
                    mapping=(flags >> 3) & 0x7,
                    cd_blue_to_alpha=bool((flags >> 6) & 1),
                    ab_blue_to_alpha=bool((flags >> 7) & 1))

def decode_final_combiner(word0, word1):
  a, b, c, d = decode_stage_inputs(word0)
  e, f, g, _ = decode_stage_inputs(word1)
  flags = word1 & 0xFF
  return FinalCombiner(a=a, b=b, c=c, d=d, e=e, f=f, g=g,
                       clamp_sum=bool((flags >> 7) & 1),
                       invert_v1=bool((flags >> 6) & 1),
                       invert_r0=bool((flags >> 5) & 1),
                       enabled=bool(word0 or word1))

def decode_program(combiner_control, shader_stage_program, other_stage_input,
                   rgb_inputs, rgb_outputs, alpha_inputs, alpha_outputs,
                   final_inputs_0, final_inputs_1, rect_tex):
  program = ShaderProgram()

  program.num_stages = combiner_control & 0xFF

  program.mux_msb = bool((combiner_control >> 8) & 1)
  program.unique_c0 = bool((combiner_control >> 12) & 1)
  program.unique_c1 = bool((combiner_control >> 16) & 1)

  for i in range(4):
    program.tex_modes[i] = (shader_stage_program >> (5 * i)) & 0x1F
    program.rect_tex[i] = bool(rect_tex[i])

  # Units 0 and 1 have a fixed source
  program.input_tex[2] = (other_stage_input >> 16) & 0xF
  program.input_tex[3] = (other_stage_input >> 20) & 0xF

  # Stage words only exist for the hardware stages
  for i in range(min(program.num_stages, MAX_STAGES)):
    program.stages.append(CombinerStage(
      rgb_input=decode_stage_inputs(rgb_inputs[i]),
      rgb_output=decode_stage_output(rgb_outputs[i]),
      alpha_input=decode_stage_inputs(alpha_inputs[i]),
      alpha_output=decode_stage_output(alpha_outputs[i])))

  program.final = decode_final_combiner(final_inputs_0, final_inputs_1)

  return program
