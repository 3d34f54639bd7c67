from typing import Any, Dict, List, Optional
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatResult, ChatGeneration


class ScriptedChatModel(BaseChatModel):
    """
    LangChain-compatible chat model for evaluation.

    Replies with the scripted text of the first key found in the prompt,
    otherwise with the default reply. Counts every call.
    """

    replies: Dict[str, str] = {}
    default_reply: str = '{"agentType": "GENERAL_CHAT", "confidence": 60}'
    call_count: int = 0

    @property
    def _llm_type(self) -> str:
        return "scripted-chat"

    def _generate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager: Optional[Any] = None,
        **kwargs: Any,
    ) -> ChatResult:
        self.call_count += 1
        prompt = "\n".join(str(m.content) for m in messages)
        reply = next(
            (text for key, text in self.replies.items() if key in prompt),
            self.default_reply,
        )
        generation = ChatGeneration(message=AIMessage(content=reply))
        return ChatResult(generations=[generation])
