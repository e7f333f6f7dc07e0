#!/usr/bin/env python3
"""
Demo Web Application - Command Console

A browser front end for one memtab session. Commands typed into the form
run against a single CommandInterpreter and the transcript is shown on
the page.

Features:
- Run any memtab command from the browser
- Session transcript with failed commands highlighted
- JSON endpoints for scripted use

Run:
    pip install flask
    python app.py

Then visit: http://localhost:5000
"""

import logging
import os
import sys
from flask import Flask, render_template, request, redirect, url_for, flash, jsonify

# Add parent directory to path to import memtab
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from memtab import CommandInterpreter

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get('MEMTAB_SECRET_KEY', 'memtab-demo-secret-key-change-in-production')

# One session for the whole app
interpreter = CommandInterpreter()
transcript = []


def run_command(command):
    """Run a command and record it in the transcript."""
    result = interpreter.execute(command)
    transcript.append({
        'command': command,
        'output': result.render(),
        'ok': result.ok,
    })
    return result


@app.route('/')
def index():
    """Console page with the session transcript."""
    return render_template('index.html',
                           transcript=transcript,
                           tables=interpreter.database.tables())


@app.route('/query', methods=['POST'])
def query():
    """Run a command from the console form."""
    command = request.form.get('command', '')

    if not command.strip():
        flash('Please enter a command.', 'error')
        return redirect(url_for('index'))

    result = run_command(command)
    if not result.ok:
        flash(result.render(), 'error')

    return redirect(url_for('index'))


@app.route('/api/query', methods=['POST'])
def api_query():
    """API endpoint to run one command."""
    payload = request.get_json(silent=True) or {}
    command = payload.get('command')

    if not isinstance(command, str):
        return jsonify({'error': "Missing 'command'"}), 400

    result = run_command(command)
    return jsonify({
        'ok': result.ok,
        'output': result.render().split('\n'),
        'affected_rows': result.affected_rows,
    })


@app.route('/api/tables')
def api_tables():
    """API endpoint describing every table in the session."""
    db = interpreter.database
    seen = set()
    tables = []
    for name in db.tables():
        # Duplicate names resolve to the first table
        if name in seen:
            continue
        seen.add(name)
        tables.append(db.describe(name))

    return jsonify({'tables': tables})


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    print("\n" + "="*60)
    print("memtab Demo - Command Console")
    print("="*60)
    print("Starting server at http://localhost:5000")
    print("\nPress Ctrl+C to stop the server.\n")

    app.run(debug=True, host='0.0.0.0', port=5000)
