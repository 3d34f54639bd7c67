EVAL_CASES = [
    {
        "id": "greeting_zh",
        "message": "你好",
        "expected_agent": "GENERAL_CHAT",
        "expected_method": "RULE_BASED",
    },
    {
        "id": "greeting_with_data_cue",
        "message": "Hi，帮我看看本月销售额",
        "expected_agent": "GENERAL_CHAT",
        "expected_method": "RULE_BASED",
    },
    {
        "id": "monthly_sales",
        "message": "这个月销售额多少",
        "expected_agent": "DATA_ANALYSIS",
        "expected_method": "RULE_BASED",
    },
    {
        "id": "top_products",
        "message": "Show me the TOP 10 products",
        "expected_agent": "DATA_ANALYSIS",
        "expected_method": "RULE_BASED",
    },
    {
        "id": "annual_leave",
        "message": "年假怎么申请",
        "expected_agent": "KNOWLEDGE_QA",
        "expected_method": "RULE_BASED",
    },
    {
        "id": "expense_policy",
        "message": "出差报销需要什么材料",
        "expected_agent": "KNOWLEDGE_QA",
        "expected_method": "RULE_BASED",
    },
    {
        "id": "llm_revenue_question",
        "message": "Which region brought in the most revenue last quarter?",
        "expected_agent": "DATA_ANALYSIS",
        "expected_method": "LLM_BASED",
        "llm_reply": '{"agentType": "DATA_ANALYSIS", "confidence": 88, "reason": "revenue ranking", "keywords": ["revenue"]}',
    },
    {
        "id": "llm_vpn_setup",
        "message": "Where do I find the VPN setup guide?",
        "expected_agent": "KNOWLEDGE_QA",
        "expected_method": "LLM_BASED",
        "llm_reply": '```json\n{"agentType": "KNOWLEDGE_QA", "confidence": 81, "reason": "internal documentation", "keywords": ["VPN"]}\n```',
    },
    {
        "id": "llm_small_talk",
        "message": "The weather is lovely today",
        "expected_agent": "GENERAL_CHAT",
        "expected_method": "LLM_BASED",
        "llm_reply": '{"agentType": "GENERAL_CHAT", "confidence": 70, "reason": "small talk", "keywords": []}',
    },
]
