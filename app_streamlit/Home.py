# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="TextSign", page_icon="✍️", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("✍️ TextSign")
st.write(
    "Firma y verifica textos o ficheros con BLAKE3 (clave secreta compartida) "
    "o Ed25519 (par de claves pública/privada)."
)
st.info("Empieza en **Generar claves** y descarga los ficheros que necesites.")
