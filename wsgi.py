import os

from screcords import create_app
from screcords.settings import load_config

config_data = load_config(os.environ.get("SCRECORDS_CONFIG", "config.json"))

app = create_app(config_data)

if __name__ == "__main__":
    app.run(debug=True, host="127.0.0.1", port=5000, threaded=False, use_reloader=False)
