# evaluation/run_real.py
import logging
from dotenv import load_dotenv
from agent_router.app import AgentRouterApp
from agent_router.config_loader import load_config_from_env
from evaluation.cases import EVAL_CASES
from evaluation.metrics import calculate_metrics
from evaluation.runner import run_evaluation

# Load .env
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)

# Step 1: Config from environment, cache off so every case hits the pipeline
config = load_config_from_env()
config.cache_enabled = False

# Step 2: Real LLM via the factory
app = AgentRouterApp(config)
app.initialize()

# Step 3: Run and score
results = run_evaluation(app, EVAL_CASES)
for r in results:
    print(f"{r['id']:<28} {r['agent_type']:<14} {r['method']:<11} "
          f"{r['confidence']:>3} {r['latency_ms']}ms")

print("Metrics:", calculate_metrics(results, EVAL_CASES))
