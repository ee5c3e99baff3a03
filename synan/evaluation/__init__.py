from synan.evaluation.analyzer import analyze
from synan.evaluation.apply import execute_application
from synan.evaluation.evaluator import evaluate, evaluate_toplevel
