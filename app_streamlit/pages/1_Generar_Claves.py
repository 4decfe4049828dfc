# --------------------------------------------------------------
# File: 1_Generar_Claves.py
# Description: Genera claves BLAKE3 o Ed25519 y ofrece su descarga.
# --------------------------------------------------------------

import streamlit as st

from textsign import Algorithm, generate_keys
from textsign.genpass import generate_password
from textsign.password_policy import estimate_strength, strength_label

st.title("🔑 Generar claves")

tab_keys, tab_pass = st.tabs(["Claves", "Contraseña"])

with tab_keys:
    algorithm = st.radio(
        "Algoritmo",
        [a.value for a in Algorithm],
        horizontal=True,
        help="BLAKE3 usa una única clave secreta; Ed25519 genera clave de firma y de verificación.",
    )

    if st.button("Generar", key="btn_generate"):
        # Conserva el conjunto generado para que las descargas no lo regeneren.
        st.session_state["key_artifacts"] = generate_keys(algorithm)

    artifacts = st.session_state.get("key_artifacts")
    if artifacts is not None:
        st.success(f"Claves {artifacts.algorithm.value} generadas.")
        for name, content in artifacts.artifacts:
            st.download_button(f"Descargar {name}", data=content, file_name=name, key=f"dl_{name}")
        if len(artifacts) > 1:
            st.warning("SECURITY: guarda la clave de firma en privado; comparte solo la de verificación.")

with tab_pass:
    length = st.slider("Longitud", min_value=4, max_value=64, value=16)
    if st.button("Generar contraseña", key="btn_genpass"):
        password = generate_password(length)
        score, reasons = estimate_strength(password)
        st.code(password)
        st.progress(score / 100.0, text=f"Fortaleza estimada: {score}/100 ({strength_label(score)})")
        if reasons:
            st.warning("Observaciones:\n- " + "\n- ".join(reasons))
