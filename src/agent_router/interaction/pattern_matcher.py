"""
Rule-based pattern matcher for intent routing.

Fast path of the router: classifies a normalized message with compiled keyword
patterns, no LLM call. Rules are compiled once at import and never mutated.
"""
import re
from dataclasses import dataclass
from typing import Optional, Pattern

from ..schemas import ClassificationResult
from .intent_types import AgentType, RouteMethod


GREETING_TOKENS = (
    "你好", "您好", "hi", "hello", "嗨", "hey", "早", "晚上好",
    "再见", "拜拜", "谢谢", "thanks",
)

DATA_ANALYSIS_CUES = (
    "分析", "统计", "报表", "报告", "数据", "查询.*数据",
    "销售额", "销量", "业绩", "排名", "top", "排行",
    "趋势", "增长", "下降", "环比", "同比", "对比",
    "最近", "本月", "上月", "本季度", "本年", "去年",
    "多少", "几个", "总共", "平均", "最高", "最低", "总计", "汇总",
)

KNOWLEDGE_QA_CUES = (
    "政策", "制度", "规定", "规范", "流程", "文档", "手册", "指南", "标准", "要求",
    "如何", "怎么", "什么是", "为什么", "哪些", "有没有", "能否", "可以吗",
    "年假", "请假", "报销", "晋升", "培训", "福利", "考勤", "薪资", "绩效",
)


def _alternation(cues) -> str:
    return "(" + "|".join(cues) + ")"


@dataclass(frozen=True)
class RoutingRules:
    """
    Compiled routing rules with their calibrated confidences.

    Confidences are fixed priors, not computed scores.
    """
    greeting_pattern: Pattern
    data_analysis_pattern: Pattern
    knowledge_qa_pattern: Pattern
    greeting_confidence: int = 95
    data_analysis_confidence: int = 90
    knowledge_qa_confidence: int = 90
    keyword_length: int = 20


DEFAULT_RULES = RoutingRules(
    greeting_pattern=re.compile("^" + _alternation(GREETING_TOKENS), re.IGNORECASE),
    data_analysis_pattern=re.compile(_alternation(DATA_ANALYSIS_CUES), re.IGNORECASE),
    knowledge_qa_pattern=re.compile(_alternation(KNOWLEDGE_QA_CUES), re.IGNORECASE),
)


def normalize_message(message: str) -> str:
    """Lower-case and trim a message for rule matching."""
    return message.lower().strip()


class PatternMatcher:
    """
    Deterministic keyword matcher.

    Evaluates greeting, data analysis and knowledge QA rules in that order;
    the first match wins. A greeting prefix outranks any data cue:
    "hi, 本月销量" is general chat.
    """

    def __init__(self, rules: RoutingRules = DEFAULT_RULES):
        self._rules = rules

    @property
    def rules(self) -> RoutingRules:
        return self._rules

    def match(self, normalized: str) -> Optional[ClassificationResult]:
        """
        Match a normalized message against the routing rules.

        :param normalized: Lower-cased, trimmed message
        :return: ClassificationResult, or None when no rule applies
        """
        rules = self._rules

        if rules.greeting_pattern.search(normalized):
            return ClassificationResult(
                agent_type=AgentType.GENERAL_CHAT,
                method=RouteMethod.RULE_BASED,
                confidence=rules.greeting_confidence,
                keywords=("greeting",),
            )

        if rules.data_analysis_pattern.search(normalized):
            return ClassificationResult(
                agent_type=AgentType.DATA_ANALYSIS,
                method=RouteMethod.RULE_BASED,
                confidence=rules.data_analysis_confidence,
                keywords=self._evidence(normalized),
            )

        if rules.knowledge_qa_pattern.search(normalized):
            return ClassificationResult(
                agent_type=AgentType.KNOWLEDGE_QA,
                method=RouteMethod.RULE_BASED,
                confidence=rules.knowledge_qa_confidence,
                keywords=self._evidence(normalized),
            )

        return None

    def _evidence(self, normalized: str):
        # Diagnostic only: leading slice of the message, not real extraction.
        return (normalized[:self._rules.keyword_length],)
