import pandas as pd
import streamlit as st
from core.system_utils import get_system_info, format_report

def render():
    st.subheader("🖥️ System")

    if st.button("Lấy thông tin hệ thống"):
        data = get_system_info()
        df = pd.DataFrame([data]).T
        df.columns = ["Giá trị"]
        st.dataframe(df.astype(str), use_container_width=True)

        st.download_button(
            "⬇️ Tải báo cáo (.txt)",
            data=format_report(data).encode("utf-8"),
            file_name="system_info.txt",
            mime="text/plain",
        )
