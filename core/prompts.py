"""
Prompt templates and canned replies for the Oracle assistant.
The LLM is grounded on the knowledge base; canned replies cover help and error cases.
"""

from typing import Iterable, Sequence

from core.knowledge_base import ProcessRecord

SYSTEM_PROMPT = """Você é o Oráculo, assistente interno que responde dúvidas de colaboradores sobre processos e procedimentos da empresa.

REGRAS:
1. Responda SOMENTE com base nos processos documentados abaixo.
2. NUNCA invente prazos, contatos, ferramentas ou etapas.
3. Se os processos não responderem à pergunta, responda exatamente: "{no_answer}"
4. Responda em português, de forma clara e objetiva.

PROCESSOS DOCUMENTADOS:
{processes}"""

PROCESS_TEMPLATE = """[{id}] {title} ({category})
Pergunta: {question}
Resposta: {answer}"""

# Sentinel the model is told to return when it cannot answer
NO_ANSWER_SENTINEL = "NAO_SEI"

HELP_TEMPLATE = """Não encontrei uma resposta específica para sua pergunta sobre "{message}".

Aqui estão alguns tópicos que posso ajudar:
{topics}

Você pode reformular sua pergunta ou perguntar sobre algum desses tópicos específicos."""

HELP_CATEGORY = "Ajuda Geral"
HELP_TITLE = "Tópicos Disponíveis"

LLM_CATEGORY = "Assistente"
LLM_TITLE = "Resposta do Oráculo"

INVALID_MESSAGE_ERROR = "Mensagem é obrigatória"
INVALID_MESSAGE_ANSWER = "Por favor, digite uma pergunta válida."

UNAVAILABLE_ERROR = "Dados não disponíveis"
UNAVAILABLE_ANSWER = (
    "Desculpe, não consegui acessar a base de conhecimento no momento. "
    "Tente novamente em alguns instantes."
)

INTERNAL_ERROR = "Erro interno do servidor"
INTERNAL_ANSWER = (
    "Desculpe, ocorreu um erro interno. Nossa equipe técnica foi notificada "
    "e está trabalhando para resolver o problema."
)


def format_process(record: ProcessRecord) -> str:
    return PROCESS_TEMPLATE.format(
        id=record.id,
        title=record.title,
        category=record.category,
        question=record.question,
        answer=record.answer,
    )


def build_system_prompt(corpus: Sequence[ProcessRecord]) -> str:
    """Build the system prompt embedding every documented process."""
    processes = "\n\n".join(format_process(record) for record in corpus)
    return SYSTEM_PROMPT.format(no_answer=NO_ANSWER_SENTINEL, processes=processes)


def build_help_message(message: str, topics: Iterable[str]) -> str:
    """Build the static help reply listing the topics the assistant covers."""
    return HELP_TEMPLATE.format(
        message=message,
        topics="\n".join(f"• {topic}" for topic in topics),
    )
