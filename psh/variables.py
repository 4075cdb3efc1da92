from psh.decode import *

varying_registers = {
  REGISTER_V0: "v0",
  REGISTER_V1: "v1",
  REGISTER_T0: "t0",
  REGISTER_T1: "t1",
  REGISTER_T2: "t2",
  REGISTER_T3: "t3"
}

temporary_registers = {
  REGISTER_R0: "r0",
  REGISTER_R1: "r1"
}


def add_var_ref(context, name):
  context.var_refs.add(name)
  return name

def get_const(context, index, unique):
  #FIXME: Should the final combiner really always be unique?
  if unique or context.is_final_stage:
    name = "c_%d_%d" % (context.stage, index)
  else:
    name = "c_0_%d" % index
  context.const_refs.add(name)
  return name

# Get the code for a register; a discarded destination is ""
def resolve(context, reg, is_dest):
  program = context.program

  if reg == REGISTER_DISCARD:
    return "" if is_dest else "0.0"
  if reg == REGISTER_C0:
    return get_const(context, 0, program.unique_c0)
  if reg == REGISTER_C1:
    return get_const(context, 1, program.unique_c1)
  if reg == REGISTER_FOG:
    #FIXME: Should be `fog`
    return "vec4(1.0)"
  if reg in varying_registers:
    return varying_registers[reg]
  if reg in temporary_registers:
    return add_var_ref(context, temporary_registers[reg])
  if reg == REGISTER_V1R0_SUM:
    add_var_ref(context, "r0")
    return "(v1 + r0)"
  if reg == REGISTER_EF_PROD:
    assert(context.var_e is not None and context.var_f is not None), "E_TIMES_F used outside of final combiner"
    return "(%s * %s)" % (context.var_e, context.var_f)

  assert(False), "Invalid register 0x%X" % reg
