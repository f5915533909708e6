from __future__ import annotations
import pandas as pd
import streamlit as st
from kanasort.grouping import label_order
from kanasort.logger import setup_logging
from kanasort.resolver import DEFAULT_MATCH_STRATEGY, MATCH_STRATEGIES, ReadingResolver
from kanasort.utils import GROUP_COLUMN, sort_dataframe, to_excel_bytes

EXCEL_MIME = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
)

setup_logging()

st.set_page_config(page_title="Meishi Sorter")
st.title("名刺 五十音ソート")

uploaded = st.file_uploader("Excelを選択", type=["xlsx"])

if uploaded:
    st.session_state.df = pd.read_excel(uploaded)

if "df" in st.session_state:
    df = st.session_state.df
    st.write("アップロードしたデータ:")
    st.dataframe(df.head())

    columns = list(df.columns)
    name_col = st.selectbox("名前/会社名の列を選択", columns, key="name_col")
    reading_col = st.selectbox(
        "読みの列を選択", ["(なし)"] + columns, key="reading_col"
    )
    strategy = st.radio(
        "部分一致の優先",
        MATCH_STRATEGIES,
        index=(
            MATCH_STRATEGIES.index(DEFAULT_MATCH_STRATEGY)
            if DEFAULT_MATCH_STRATEGY in MATCH_STRATEGIES
            else 0
        ),
        horizontal=True,
    )

    if st.button("並べ替え"):
        resolver = ReadingResolver(strategy=strategy)
        st.session_state.out_df = sort_dataframe(
            df,
            name_col,
            None if reading_col == "(なし)" else reading_col,
            resolver=resolver,
        )

if "out_df" in st.session_state:
    out_df = st.session_state.out_df
    for label in sorted(out_df[GROUP_COLUMN].unique(), key=label_order):
        section = out_df[out_df[GROUP_COLUMN] == label]
        st.subheader(label)
        st.dataframe(section.drop(columns=[GROUP_COLUMN]))
    st.download_button(
        label="保存してダウンロード",
        data=to_excel_bytes(out_df),
        file_name="並べ替え結果.xlsx",
        mime=EXCEL_MIME,
    )
