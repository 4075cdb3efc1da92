from psh.variables import add_var_ref
from psh.expressions import build_input_expr


# r0.rgb = lerp(c, b, a) + d
# r0.a = g
#
# E and F are only captured while this runs, so E_TIMES_F elsewhere fails.
def add_final_stage_code(context, final):
  context.var_e = build_input_expr(context, final.e, False)
  context.var_f = build_input_expr(context, final.f, False)

  a = build_input_expr(context, final.a, False)
  b = build_input_expr(context, final.b, False)
  c = build_input_expr(context, final.c, False)
  d = build_input_expr(context, final.d, False)
  # G is built in the alpha lane on purpose: it lands in a scalar, so an RGB
  # channel select reads blue instead of producing `r0.a = x.rgb`.
  g = build_input_expr(context, final.g, True)

  add_var_ref(context, "r0")
  context.code.append("r0.rgb = vec3((%s * %s) + ((1.0 - %s) * %s) + %s);\n" % (a, b, a, c, d))
  context.code.append("r0.a = %s;\n" % g)

  context.var_e = None
  context.var_f = None
