# sqlchat/llm.py

import logging

from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_groq import ChatGroq
from langchain_openai import ChatOpenAI

from .config import ConfigError, Settings

logger = logging.getLogger(__name__)


def build_chat_model(settings: Settings):
    """
    Initialize the language model for the configured provider.
    """
    provider = settings.llm_provider

    if provider == "openai":
        if not settings.openai_api_key:
            raise ConfigError("OPENAI_API_KEY is required when LLM_PROVIDER=openai")
        logger.info("Using OpenAI model %s", settings.openai_model)
        return ChatOpenAI(
            model=settings.openai_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            streaming=False,
            openai_api_key=settings.openai_api_key,
        )

    if provider == "google":
        if not settings.google_api_key:
            raise ConfigError("GOOGLE_API_KEY is required when LLM_PROVIDER=google")
        logger.info("Using Google model %s", settings.google_model)
        return ChatGoogleGenerativeAI(
            model=settings.google_model,
            temperature=settings.llm_temperature,
            max_output_tokens=settings.llm_max_tokens,
            google_api_key=settings.google_api_key,
        )

    if provider == "groq":
        if not settings.groq_api_key:
            raise ConfigError("GROQ_API_KEY is required when LLM_PROVIDER=groq")
        logger.info("Using Groq model %s", settings.groq_model)
        return ChatGroq(
            model=settings.groq_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            streaming=False,
            api_key=settings.groq_api_key,
        )

    raise ConfigError(f"Unsupported LLM provider: {provider}")
