from collections import defaultdict


def calculate_metrics(results, eval_cases):
    case_map = {c["id"]: c for c in eval_cases}

    correct = 0
    method_correct = 0
    rule_based = 0
    fallbacks = 0
    per_agent = defaultdict(lambda: {"correct": 0, "total": 0})

    for r in results:
        expected = case_map[r["id"]]
        bucket = per_agent[expected["expected_agent"]]
        bucket["total"] += 1

        if r["agent_type"] == expected["expected_agent"]:
            correct += 1
            bucket["correct"] += 1

        if r["method"] == expected.get("expected_method", r["method"]):
            method_correct += 1

        if r["method"] == "RULE_BASED":
            rule_based += 1
        elif r["confidence"] == 50 and not r["keywords"]:
            fallbacks += 1

    total = len(results)
    return {
        "accuracy": correct / total if total else 1.0,
        "method_accuracy": method_correct / total if total else 1.0,
        "rule_based_ratio": rule_based / total if total else 0.0,
        "fallback_count": fallbacks,
        "per_agent_accuracy": {
            agent: b["correct"] / b["total"] for agent, b in sorted(per_agent.items())
        },
        "total_cases": total,
    }
