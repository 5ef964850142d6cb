import streamlit as st

def render():
    st.markdown(
        """
        <style>
          .calligraphy-title{
            font-family: "Dancing Script","Great Vibes","Satisfy",cursive;
            font-size: 56px;
            line-height: 1.1;
            margin: .2em 0 .1em 0;
          }
          @media (max-width: 768px){
            .calligraphy-title{ font-size: 38px; }
          }
          @media (prefers-color-scheme: dark){
            .calligraphy-title{ color: #f3f4f6; }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown('<div class="calligraphy-title">VLabsPassKit 🔑</div>', unsafe_allow_html=True)

    st.markdown(
        "- **Password**: tạo mật khẩu ngẫu nhiên an toàn (os.urandom), chấm điểm độ mạnh, xuất CSV.\n"
        "- **System**: thông tin hệ thống của máy đang chạy app.\n"
        "\nDòng lệnh: `vlabs-passkit generate -l 16 -n 5`, `vlabs-passkit strength <pw>`, `vlabs-passkit sysinfo`."
    )

    st.info("Chọn mục ở thanh **sidebar** để bắt đầu.")
