# Arithmetic
ADD = 1     # M[P1] +  M[P2] -> M[P3]
MUL = 2     # M[P1] *  M[P2] -> M[P3]

# Control
HLT = 99

# Layout
STRIDE = 4  # opcode, P1, P2, P3

RESULT_ADDR = 0
NOUN_ADDR = 1
VERB_ADDR = 2
