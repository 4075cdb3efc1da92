# Translation of nv2a register combiners into GLSL fragment shaders.
#
# All terminology follows the Xbox D3D pixel shader definitions. For
# background, see the OpenGL extension:
# https://www.opengl.org/registry/specs/NV/register_combiners.txt

from psh.decode import decode_input, decode_stage_inputs, decode_stage_output, \
                       decode_final_combiner, decode_program, ShaderProgram
from psh.context import TranslatorContext
from psh.assembler import emit_program, assemble, translate
