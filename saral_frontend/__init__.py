# Frontend package
# Contains the Streamlit app and its pages
