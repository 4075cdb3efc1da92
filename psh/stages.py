# General combiner stages.
#
# AB, CD and SUM run in parallel on hardware, but destinations are written in
# order and later statements (blue-to-alpha) read back what was just written.

from psh.decode import MAX_STAGES
from psh.variables import resolve
from psh.expressions import build_input_expr, apply_output_mapping


def get_product(x, y, is_dot_product):
  if is_dot_product:
    return "dot(%s, %s)" % (x, y)
  return "(%s * %s)" % (x, y)

def add_stage_code(context, inputs, output, write_mask, is_alpha):
  code = context.code

  a, b, c, d = [build_input_expr(context, selector, is_alpha) for selector in inputs]

  caster = "vec3" if len(write_mask) == 3 else ""

  ab = get_product(a, b, output.ab_dot)
  cd = get_product(c, d, output.cd_dot)

  ab_mapping = apply_output_mapping(ab, output.mapping)
  cd_mapping = apply_output_mapping(cd, output.mapping)
  ab_dest = resolve(context, output.ab, True)
  cd_dest = resolve(context, output.cd, True)
  sum_dest = resolve(context, output.muxsum, True)

  if ab_dest:
    code.append("%s.%s = %s(%s);\n" % (ab_dest, write_mask, caster, ab_mapping))
  if cd_dest:
    code.append("%s.%s = %s(%s);\n" % (cd_dest, write_mask, caster, cd_mapping))

  # Blue-to-alpha only exists for RGB, and only for a written register
  if not is_alpha and output.ab_blue_to_alpha and ab_dest:
    code.append("%s.a = %s.b;\n" % (ab_dest, ab_dest))
  if not is_alpha and output.cd_blue_to_alpha and cd_dest:
    code.append("%s.a = %s.b;\n" % (cd_dest, cd_dest))

  if output.mux:
    #FIXME: Respect the MSB / LSB select in the combiner control
    muxsum = "((r0.a >= 0.5) ? %s : %s)" % (cd, ab)
  else:
    muxsum = "(%s + %s)" % (ab, cd)

  sum_mapping = apply_output_mapping(muxsum, output.mapping)
  if sum_dest:
    code.append("%s.%s = %s(%s);\n" % (sum_dest, write_mask, caster, sum_mapping))

def emit_stages(context):
  program = context.program
  assert(program.num_stages <= MAX_STAGES), "Bad stage count %d" % program.num_stages

  for i, stage in enumerate(program.stages):
    context.stage = i
    context.code.append("// Stage %d\n" % i)
    add_stage_code(context, stage.rgb_input, stage.rgb_output, "rgb", False)
    add_stage_code(context, stage.alpha_input, stage.alpha_output, "a", True)
