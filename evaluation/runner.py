from time import time


def run_evaluation(router, eval_cases):
    results = []

    for case in eval_cases:
        start = time()
        result = router.route(case["message"])
        latency_ms = int((time() - start) * 1000)

        results.append({
            "id": case["id"],
            "message": case["message"],
            "agent_type": result.agent_type.value,
            "method": result.method.value,
            "confidence": result.confidence,
            "keywords": list(result.keywords),
            "latency_ms": latency_ms,
        })

    return results
