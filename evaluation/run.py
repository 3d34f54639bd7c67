from agent_router.agent import LangChainCompletionClient
from agent_router.interaction import IntentRouter
from evaluation.cases import EVAL_CASES
from evaluation.dummy_llm import ScriptedChatModel
from evaluation.metrics import calculate_metrics
from evaluation.runner import run_evaluation

# Step 1: scripted LLM with one reply per LLM-routed case, keyed by message
llm = ScriptedChatModel(
    replies={c["message"]: c["llm_reply"] for c in EVAL_CASES if "llm_reply" in c}
)

# Step 2: Router without cache so every case exercises the full pipeline
router = IntentRouter(
    completion_client=LangChainCompletionClient(llm),
    cache_enabled=False,
)

# Step 3: Run and score
results = run_evaluation(router, EVAL_CASES)
for r in results:
    print(f"{r['id']:<28} {r['agent_type']:<14} {r['method']:<11} {r['confidence']:>3}")
    print("-" * 60)

print("Metrics:", calculate_metrics(results, EVAL_CASES))
print(f"LLM calls: {llm.call_count}")
