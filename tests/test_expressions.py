import pytest

from psh.decode import *
from psh.context import FINAL_STAGE, TranslatorContext
from psh.expressions import build_input_expr, apply_output_mapping


def make_context():
  return TranslatorContext(ShaderProgram())


@pytest.mark.parametrize("modifier, expected", [
  (INPUTMAPPING_UNSIGNED_IDENTITY, "v0.rgb"),
  (INPUTMAPPING_UNSIGNED_INVERT, "(1.0 - v0.rgb)"),
  (INPUTMAPPING_EXPAND_NORMAL, "(2.0 * v0.rgb - 1.0)"),
  (INPUTMAPPING_EXPAND_NEGATE, "(1.0 - 2.0 * v0.rgb)"),
  (INPUTMAPPING_HALFBIAS_NORMAL, "(v0.rgb - 0.5)"),
  (INPUTMAPPING_HALFBIAS_NEGATE, "(0.5 - v0.rgb)"),
  (INPUTMAPPING_SIGNED_IDENTITY, "v0.rgb"),
  (INPUTMAPPING_SIGNED_NEGATE, "(-v0.rgb)"),
])
def test_input_modifiers(modifier, expected):
  selector = InputSelector(reg=REGISTER_V0, channel=CHANNEL_RGB, modifier=modifier)
  assert build_input_expr(make_context(), selector, False) == expected

def test_swizzles():
  context = make_context()
  assert build_input_expr(context, InputSelector(REGISTER_T1, CHANNEL_RGB, 0), False) == "t1.rgb"
  assert build_input_expr(context, InputSelector(REGISTER_T1, CHANNEL_RGB, 0), True) == "t1.b"
  assert build_input_expr(context, InputSelector(REGISTER_T1, CHANNEL_ALPHA, 0), False) == "t1.a"
  assert build_input_expr(context, InputSelector(REGISTER_T1, CHANNEL_ALPHA, 0), True) == "t1.a"

def test_zero_has_no_swizzle():
  context = make_context()
  one = InputSelector(REGISTER_ZERO, CHANNEL_ALPHA, INPUTMAPPING_UNSIGNED_INVERT)
  assert build_input_expr(context, one, False) == "(1.0 - 0.0)"
  assert build_input_expr(context, one, True) == "(1.0 - 0.0)"
  half = InputSelector(REGISTER_ZERO, CHANNEL_RGB, INPUTMAPPING_HALFBIAS_NEGATE)
  assert build_input_expr(context, half, False) == "(0.5 - 0.0)"

def test_fog_and_sum_get_swizzled():
  context = make_context()
  assert build_input_expr(context, InputSelector(REGISTER_FOG, CHANNEL_ALPHA, 0), False) == "vec4(1.0).a"
  assert build_input_expr(context, InputSelector(REGISTER_V1R0_SUM, CHANNEL_RGB, 0), False) == "(v1 + r0).rgb"

def test_ef_product_swizzle():
  context = make_context()
  context.stage = FINAL_STAGE
  selector = InputSelector(REGISTER_EF_PROD, CHANNEL_RGB, 0)

  context.var_e = "t0.rgb"
  context.var_f = "v0.rgb"
  assert build_input_expr(context, selector, False) == "(t0.rgb * v0.rgb).rgb"

  # Already a scalar
  context.var_e = "t0.a"
  context.var_f = "v0.a"
  assert build_input_expr(context, selector, False) == "(t0.a * v0.a)"

@pytest.mark.parametrize("mapping, expected", [
  (OUTPUT_IDENTITY, "x"),
  (OUTPUT_BIAS, "(x - 0.5)"),
  (OUTPUT_SHIFTLEFT_1, "(x * 2.0)"),
  (OUTPUT_SHIFTLEFT_1_BIAS, "((x - 0.5) * 2.0)"),
  (OUTPUT_SHIFTLEFT_2, "(x * 4.0)"),
  (OUTPUT_SHIFTRIGHT_1, "(x / 2.0)"),
])
def test_output_mappings(mapping, expected):
  assert apply_output_mapping("x", mapping) == expected

@pytest.mark.parametrize("mapping", [5, 7])
def test_invalid_output_mapping(mapping):
  with pytest.raises(AssertionError):
    apply_output_mapping("x", mapping)

def test_nested_expressions_stay_parenthesized():
  context = make_context()
  x = build_input_expr(context, InputSelector(REGISTER_R0, CHANNEL_RGB, INPUTMAPPING_EXPAND_NEGATE), False)
  assert apply_output_mapping("(%s * %s)" % (x, x), OUTPUT_SHIFTLEFT_1_BIAS) == \
         "((((1.0 - 2.0 * r0.rgb) * (1.0 - 2.0 * r0.rgb)) - 0.5) * 2.0)"
