"""
Central configuration for the Oracle process assistant.
All tuneable parameters in one place.
"""

import os
from pathlib import Path

# ── Paths ──────────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent
DATA_DIR = PROJECT_ROOT / "data"
KNOWLEDGE_BASE_PATH = Path(
    os.getenv("ORACLE_KNOWLEDGE_BASE", str(DATA_DIR / "processos.json"))
)

# ── Matching ──────────────────────────────────────────────────────────────
MIN_SCORE = 0.2            # a record must score strictly above this
QUESTION_WEIGHT = 1.0
TAGS_WEIGHT = 0.8
TITLE_WEIGHT = 0.9
MIN_TOKEN_LENGTH = 3       # shorter tokens never count as a match
SUBSTRING_BONUS = 2        # added when one normalized text contains the other

# ── LLM Backend ───────────────────────────────────────────────────────────
LLM_BACKEND = os.getenv("ORACLE_LLM_BACKEND", "offline")   # "offline" | "openai"
OPENAI_MODEL = "gpt-4o-mini"
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
LLM_TIMEOUT = 20.0         # seconds
LLM_TEMPERATURE = 0.2

# ── Chat UI ───────────────────────────────────────────────────────────────
HELP_TOPICS = [
    "Como criar tarefa de alteração de arte",
    "Prazos de produção de e-mail marketing",
    "Solicitar acesso ao Google Analytics (GA4)",
    "Abrir chamados no suporte de TI",
    "Solicitar férias",
    "Configurar acesso VPN",
]

COMMAND_SUGGESTIONS = [
    {
        "label": "Como criar a tarefa de alteração de arte?",
        "description": "Processo para solicitar alterações em materiais visuais",
        "prefix": "/arte",
    },
    {
        "label": "Quantos dias o e-mail marketing leva para ser produzido?",
        "description": "Prazos e etapas da produção de campanhas de email",
        "prefix": "/email",
    },
    {
        "label": "Como solicitar acesso ao GA4?",
        "description": "Processo para obter permissões no Google Analytics",
        "prefix": "/ga4",
    },
    {
        "label": "Como abrir chamado no suporte de TI?",
        "description": "Procedimentos para solicitar suporte técnico",
        "prefix": "/ti",
    },
    {
        "label": "Como solicitar férias?",
        "description": "Processo para requisitar período de descanso",
        "prefix": "/ferias",
    },
    {
        "label": "Como configurar acesso VPN?",
        "description": "Instruções para trabalho remoto via VPN",
        "prefix": "/vpn",
    },
]

# ── Web Server ────────────────────────────────────────────────────────────
WEB_HOST = "127.0.0.1"
WEB_PORT = 5000
WEB_DEBUG = False

# ── Logging ───────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
