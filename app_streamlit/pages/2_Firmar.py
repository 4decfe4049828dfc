# --------------------------------------------------------------
# File: 2_Firmar.py
# Description: Firma un texto o un fichero subido mediante Streamlit.
# --------------------------------------------------------------

import io

import streamlit as st

from textsign import Algorithm, TextSignError, sign
from textsign.b64 import Base64Format, encode

st.title("✍️ Firmar")

algorithm = st.radio("Algoritmo", [a.value for a in Algorithm], horizontal=True)
key_file = st.file_uploader(
    "Clave (blake3.key o ed25519.signing.key)", type=None, key="sign_key"
)

source = st.radio("Entrada", ["Texto", "Fichero"], horizontal=True)
if source == "Texto":
    data = st.text_area("Mensaje").encode("utf-8")
else:
    uploaded = st.file_uploader("Selecciona un fichero", type=None, key="sign_input")
    data = uploaded.read() if uploaded else b""

if st.button("Firmar", disabled=key_file is None):
    try:
        signature = sign(io.BytesIO(data), key_file.read(), algorithm)
    except TextSignError as exc:
        st.error(str(exc))
    else:
        st.success(f"Firma {algorithm} de {len(signature)} bytes.")
        st.code(encode(signature, Base64Format.URLSAFE))
