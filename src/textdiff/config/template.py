# Dashboard template
DASHBOARD_TEMPLATE = '''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Text Diff</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: #f4f5f7;
            min-height: 100vh;
            color: #333;
        }
        .header {
            text-align: center;
            padding: 40px 20px;
        }
        .header h1 {
            font-size: 2.4em;
            margin-bottom: 10px;
            font-weight: 300;
        }
        .container {
            max-width: 900px;
            margin: 0 auto;
            padding: 0 20px;
        }
        .tool-card {
            background: white;
            border-radius: 10px;
            padding: 25px;
            margin-bottom: 20px;
            box-shadow: 0 4px 12px rgba(0,0,0,0.08);
        }
        .tool-card h3 {
            color: #2d3748;
            margin-bottom: 10px;
        }
        .tool-card p {
            color: #718096;
            line-height: 1.5;
            margin-bottom: 15px;
        }
        .tag {
            background: #e3f2fd;
            color: #1565c0;
            padding: 4px 12px;
            border-radius: 20px;
            font-size: 0.8em;
        }
        code {
            background: #edf2f7;
            padding: 2px 6px;
            border-radius: 4px;
        }
        .empty-state {
            text-align: center;
            padding: 60px 20px;
        }
    </style>
</head>
<body>
    <div class="header">
        <h1>Text Diff</h1>
        <p>Line, word and character level comparison of two texts</p>
    </div>

    <div class="container">
        {% if tools %}
            {% for tool in tools %}
            <div class="tool-card">
                <h3>{{ tool.icon }} {{ tool.name }}</h3>
                <p>{{ tool.description }}</p>
                <p>POST <code>{{ tool.api }}</code> with modes
                    {% for mode in tool.modes %}<code>{{ mode }}</code> {% endfor %}</p>
                <div>
                    {% for tag in tool.tags %}
                    <span class="tag">{{ tag }}</span>
                    {% endfor %}
                </div>
            </div>
            {% endfor %}
        {% else %}
        <div class="empty-state">
            <h2>No tools enabled</h2>
            <p>Enable the text diff tool in config.json to use it here.</p>
        </div>
        {% endif %}
    </div>
</body>
</html>
'''
