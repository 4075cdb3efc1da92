from psh.decode import *
from psh.variables import resolve

input_mappings = (
  '%s',               # UNSIGNED_IDENTITY
  '(1.0 - %s)',       # UNSIGNED_INVERT
  '(2.0 * %s - 1.0)', # EXPAND_NORMAL
  '(1.0 - 2.0 * %s)', # EXPAND_NEGATE
  '(%s - 0.5)',       # HALFBIAS_NORMAL
  '(0.5 - %s)',       # HALFBIAS_NEGATE
  '%s',               # SIGNED_IDENTITY
  '(-%s)'             # SIGNED_NEGATE
)

output_mappings = (
  '%s',                # IDENTITY
  '(%s - 0.5)',        # BIAS
  '(%s * 2.0)',        # SHIFTLEFT_1
  '((%s - 0.5) * 2.0)', # SHIFTLEFT_1_BIAS
  '(%s * 4.0)',        # SHIFTLEFT_2
  None,                # <invalid:5>
  '(%s / 2.0)',        # SHIFTRIGHT_1
  None                 # <invalid:7>
)


def get_swizzle(channel, is_alpha):
  if channel == CHANNEL_ALPHA:
    return ".a"
  assert(channel == CHANNEL_RGB)
  return ".b" if is_alpha else ".rgb"

def build_input_expr(context, selector, is_alpha):
  reg = resolve(context, selector.reg, False)

  # Constant zero and an alpha E_TIMES_F are already scalars
  is_alpha_product = (selector.reg == REGISTER_EF_PROD and ".a" in reg)
  if reg != "0.0" and not is_alpha_product:
    reg += get_swizzle(selector.channel, is_alpha)

  assert(0 <= selector.modifier < len(input_mappings)), "Invalid input mapping %d" % selector.modifier
  return input_mappings[selector.modifier] % reg

def apply_output_mapping(expr, mapping):
  assert(0 <= mapping < len(output_mappings))
  code = output_mappings[mapping]
  assert(code is not None), "Invalid output mapping %d" % mapping
  return code % expr
