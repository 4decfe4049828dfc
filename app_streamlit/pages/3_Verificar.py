# --------------------------------------------------------------
# File: 3_Verificar.py
# Description: Verifica una firma URL-safe Base64 sobre un texto o fichero.
# --------------------------------------------------------------

import io

import streamlit as st

from textsign import Algorithm, TextSignError, verify
from textsign.b64 import Base64Format, decode

st.title("✅ Verificar")

algorithm = st.radio("Algoritmo", [a.value for a in Algorithm], horizontal=True)
key_file = st.file_uploader(
    "Clave (blake3.key o ed25519.verifying.key)", type=None, key="verify_key"
)
signature_text = st.text_input("Firma (Base64 URL-safe)")

source = st.radio("Entrada", ["Texto", "Fichero"], horizontal=True)
if source == "Texto":
    data = st.text_area("Mensaje").encode("utf-8")
else:
    uploaded = st.file_uploader("Selecciona un fichero", type=None, key="verify_input")
    data = uploaded.read() if uploaded else b""

if st.button("Verificar", disabled=key_file is None or not signature_text):
    try:
        signature = decode(signature_text, Base64Format.URLSAFE)
        ok = verify(io.BytesIO(data), key_file.read(), signature, algorithm)
    except TextSignError as exc:
        st.error(str(exc))
    else:
        if ok:
            st.success("Firma válida.")
        else:
            st.error("La firma no corresponde al mensaje o a la clave.")
