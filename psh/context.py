from psh.decode import MAX_STAGES

# Stage cursor value while the final combiner is emitted
FINAL_STAGE = MAX_STAGES


# First insertion order is the declaration order in the shader
class OrderedSet():

  def __init__(self):
    self._items = {}

  def add(self, item):
    self._items.setdefault(item, None)

  def __contains__(self, item):
    return item in self._items

  def __iter__(self):
    return iter(self._items)

  def __len__(self):
    return len(self._items)

  def __repr__(self):
    return "OrderedSet(%r)" % list(self._items)


class CodeBuffer():

  def __init__(self):
    self._parts = []

  def append(self, text):
    self._parts.append(text)

  def __str__(self):
    return "".join(self._parts)


# Working state of a single translation
class TranslatorContext():

  def __init__(self, program):
    self.program = program
    self.stage = 0
    self.var_refs = OrderedSet()
    self.const_refs = OrderedSet()
    self.code = CodeBuffer()

    # Only valid while the final combiner is emitted
    self.var_e = None
    self.var_f = None

  @property
  def is_final_stage(self):
    return self.stage == FINAL_STAGE
