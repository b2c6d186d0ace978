"""Streamlit application entry point for browsing LC 214/2025."""

import logging
import sys
import streamlit as st
from lc214.config import get_settings
from lc214.export import load_annexes, load_bundle
from lc214.search import run_search

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = (
    "Não foi possível carregar todos os dados da LC 214/2025. "
    "Verifique se os arquivos foram gerados ou tente novamente mais tarde."
)

SEARCH_MODE_LABELS = {
    "texto": "Texto",
    "artigo": "Nº do artigo",
    "anexo": "Anexo",
}

SEARCH_PLACEHOLDERS = {
    "texto": "Buscar no texto da lei e dos anexos...",
    "artigo": "Digite o número do artigo (ex: 1, 42, 156)",
    "anexo": "Digite o anexo (ex: I, III, anexo 4)",
}

# Page configuration
st.set_page_config(
    page_title="LC 214/2025",
    page_icon="📘",
    layout="wide",
)


@st.cache_resource
def load_data():
    """
    Load and cache the generated article bundle and annex collection.

    Returns:
        (bundle, annexes) tuple

    Raises:
        FileNotFoundError: If either JSON file has not been generated
        ValueError: If either JSON file is malformed
    """
    settings = get_settings()
    logger.info("Loading LC 214 data...")
    bundle = load_bundle(settings.articles_output_path)
    annexes = load_annexes(settings.annexes_output_path)
    logger.info(f"Loaded {bundle.total} articles and {len(annexes)} annexes")
    return bundle, annexes


try:
    bundle, annexes = load_data()
except Exception as e:
    logger.error(f"Error loading LC 214 data: {e}", exc_info=True)
    st.error(LOAD_ERROR_MESSAGE)
    st.markdown("[← Voltar ao início](/)")
    st.stop()

# Header
st.title(f"📘 {bundle.title}")
if bundle.preamble:
    st.caption(bundle.preamble)

# Sidebar
with st.sidebar:
    st.header("Sobre")
    st.markdown(
        f"""
        Consulta ao texto da LC 214/2025 extraído do documento oficial.

        **Artigos**: {bundle.total}
        **Anexos**: {len(annexes)}
        """
    )

mode = st.radio(
    "Tipo de busca",
    options=list(SEARCH_MODE_LABELS),
    format_func=SEARCH_MODE_LABELS.get,
    horizontal=True,
)
query = st.text_input("Busca", placeholder=SEARCH_PLACEHOLDERS[mode], label_visibility="collapsed")

hits = run_search(mode, query, bundle.articles, annexes)

if not hits:
    st.info("Nenhum resultado encontrado. Tente outro termo ou tipo de busca.")
    st.stop()

st.caption(f"{len(hits)} resultado(s)")

for hit in hits:
    with st.expander(hit.title):
        if hit.is_annex:
            st.html(hit.body)
        else:
            st.text(hit.body)
