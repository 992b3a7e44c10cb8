import streamlit as st

MODEL_NOTEBOOK_URL = (
    "https://colab.research.google.com/drive/1FSznDEK3Xhwd4H0tX6vv5geidjeRVXlF#scrollTo=ICdNTBJJ3OSc"
)

features = {
    "Conjunto de Dados": (
        "Analisamos dados históricos de acidentes nas rodovias federais brasileiras, "
        "fornecidos pela PRF, abrangendo o período de 2017 a 2023, com informações "
        "detalhadas sobre os acidentes."
    ),
    "Pré-processamento dos Dados": (
        "Realizamos limpeza, tratamento de valores ausentes, remoção de outliers e "
        "codificação das variáveis para preparar os dados para modelagem."
    ),
    "Seleção de Algoritmos": (
        "Escolhemos algoritmos como Regressão Logística, SVM Linear, Árvore de Decisão e "
        "Random Forest para prever as probabilidades de uma pessoa sair ilesa em acidentes."
    ),
    "Métricas de Avaliação": (
        "Utilizamos métricas como acurácia, precisão, revocação e área ROC para avaliar o "
        "desempenho dos modelos de aprendizado de máquina."
    ),
}


def render_introduction():
    st.header("Análise de Acidentes nas Rodovias Federais")
    st.markdown(
        "Explore nossa análise preditiva de acidentes nas rodovias federais brasileiras, "
        "baseada em dados reais e modelos de aprendizado de máquina."
    )

    for title, description in features.items():
        with st.expander(title, expanded=True):
            st.write(description)

    st.link_button("Ver o código do modelo", MODEL_NOTEBOOK_URL)
