# Assembles the GLSL fragment shader.
#
# The generated code is laid out as:
#
#   <sampler uniforms>
#   <constant uniforms>
#   void main() {
#   <varyings, texture fetches, temporaries>
#   <stages, final combiner>
#   gl_FragColor = r0;
#   }

from psh.decode import *
from psh.context import FINAL_STAGE, CodeBuffer, TranslatorContext
from psh.variables import add_var_ref
from psh.stages import emit_stages
from psh.final_combiner import add_final_stage_code

DebugPrint = False


# Returns (sampler type, local declaration); pass-through has no sampler
def get_texture_fetch(unit, mode, rect):
  if mode == TEXTUREMODES_PROJECT2D:
    if rect:
      sampler_type = "sampler2DRect"
      sampler_function = "texture2DRect"
    else:
      sampler_type = "sampler2D"
      sampler_function = "texture2D"
    return (sampler_type, "vec4 t%d = %s(texSamp%d, gl_TexCoord[%d].xy);\n" % (unit, sampler_function, unit, unit))
  elif mode == TEXTUREMODES_PROJECT3D:
    return ("sampler3D", "vec4 t%d = texture3D(texSamp%d, gl_TexCoord[%d].xyz);\n" % (unit, unit, unit))
  elif mode == TEXTUREMODES_CUBEMAP:
    return ("samplerCube", "vec4 t%d = textureCube(texSamp%d, gl_TexCoord[%d].xyz);\n" % (unit, unit, unit))
  elif mode == TEXTUREMODES_PASSTHRU:
    return (None, "vec4 t%d;\n" % unit)

  name = texture_modes[mode] if mode < len(texture_modes) else "<invalid:0x%X>" % mode
  assert(False), "Unsupported texture mode %s for unit %d" % (name, unit)

def emit_program(program):
  context = TranslatorContext(program)

  emit_stages(context)

  if program.final.enabled:
    context.stage = FINAL_STAGE
    context.code.append("// Final Combiner\n")
    add_final_stage_code(context, program.final)

  # Output is always read from r0
  add_var_ref(context, "r0")

  return context

def assemble(context):
  program = context.program

  preamble = CodeBuffer()
  variables = CodeBuffer()

  variables.append("vec4 v0 = gl_Color;\n")
  variables.append("vec4 v1 = gl_SecondaryColor;\n")
  variables.append("float fog = gl_FogFragCoord;\n")

  for i in range(4):
    mode = program.tex_modes[i]
    if mode == TEXTUREMODES_NONE:
      continue
    sampler_type, fetch = get_texture_fetch(i, mode, program.rect_tex[i])
    variables.append(fetch)
    if sampler_type is not None:
      preamble.append("uniform %s texSamp%d;\n" % (sampler_type, i))

  for name in context.var_refs:
    variables.append("vec4 %s;\n" % name)
    if name == "r0":
      if program.tex_modes[0] != TEXTUREMODES_NONE:
        variables.append("r0.a = t0.a;\n")
      else:
        variables.append("r0.a = 1.0;\n")

  for name in context.const_refs:
    preamble.append("uniform vec4 %s;\n" % name)

  final = CodeBuffer()
  final.append(str(preamble))
  final.append("void main() {\n")
  final.append(str(variables))
  final.append(str(context.code))
  final.append("gl_FragColor = r0;\n")
  final.append("}\n")
  return str(final)

def translate(combiner_control, shader_stage_program, other_stage_input,
              rgb_inputs, rgb_outputs, alpha_inputs, alpha_outputs,
              final_inputs_0, final_inputs_1, rect_tex):
  program = decode_program(combiner_control, shader_stage_program, other_stage_input,
                           rgb_inputs, rgb_outputs, alpha_inputs, alpha_outputs,
                           final_inputs_0, final_inputs_1, rect_tex)
  code = assemble(emit_program(program))
  if DebugPrint:
    print(code)
  return code
