"""Per-node analysis functions for the synan analyzer.

Each function takes one syntax node plus the analyzer itself (to analyze the
node's children) and returns the node's executable. The analyzer consults
these in its dispatch on node kind.
"""

from synan.evaluation.analyzers.literal_form import analyze_literal
from synan.evaluation.analyzers.name_form import analyze_name
from synan.evaluation.analyzers.const_form import analyze_constant_declaration
from synan.evaluation.analyzers.conditional_form import analyze_conditional, is_true
from synan.evaluation.analyzers.function_form import analyze_function_definition
from synan.evaluation.analyzers.sequence_form import analyze_sequence
from synan.evaluation.analyzers.block_form import analyze_block
from synan.evaluation.analyzers.return_form import analyze_return
from synan.evaluation.analyzers.application_form import analyze_application
