import time

from flask import Flask, redirect, request, url_for, session, render_template, jsonify

from config import (
    SECRET_KEY, ALUMNI_DATA_PATH, PAGE_SIZE, CAROUSEL_INTERVAL, API_MAX_LIMIT,
    COURSE_OPTIONS, DEFAULT_ALUMNI_IMAGE,
)
from alumni_data import load_alumni
from carousel import Carousel, SLIDES
from directory import AlumniDirectory, DirectoryViewState, filter_and_sort

app = Flask(
    __name__,
    static_folder="static",
    static_url_path=""
)

app.config['SECRET_KEY'] = SECRET_KEY
app.config['PAGE_SIZE'] = PAGE_SIZE
app.config['CAROUSEL_INTERVAL'] = CAROUSEL_INTERVAL

# The dataset is read once at startup and shared read-only by every request
app.config['ALUMNI_RECORDS'] = load_alumni(ALUMNI_DATA_PATH)
app.logger.info(f"Alumni directory ready with {len(app.config['ALUMNI_RECORDS'])} records")

STATE_SESSION_KEY = 'directory_state'

NAV_LINKS = [
    ('home', 'Home'),
    ('alumni_page', 'Alumni'),
    ('events', 'Events'),
    ('faculty', 'Faculty'),
    ('reach_us', 'Reach Us'),
    ('contact_form', 'Form'),
]

# ---------------------- Helper functions ----------------------
def get_directory():
    """Rebuild the current visitor's directory from the session view state."""
    page_size = app.config['PAGE_SIZE']
    state = DirectoryViewState.from_dict(session.get(STATE_SESSION_KEY), page_size=page_size)
    carousel = Carousel(interval=app.config['CAROUSEL_INTERVAL'])
    directory = AlumniDirectory(app.config['ALUMNI_RECORDS'], page_size=page_size,
                                state=state, carousel=carousel)
    directory.sync_carousel(time.time())
    return directory

def save_directory(directory):
    """Persist the view state and tear the per-request directory down."""
    session[STATE_SESSION_KEY] = directory.state.to_dict()
    directory.close()

def alumni_card(record):
    """JSON/template shape of one alumni card."""
    card = record.to_dict()
    card['Image'] = record.Image or DEFAULT_ALUMNI_IMAGE
    card['year'] = record.year
    return card

def _int_arg(name, default):
    try:
        return int(request.args.get(name, default))
    except (TypeError, ValueError):
        return default

@app.context_processor
def inject_nav():
    return {'nav_links': NAV_LINKS}

# ---------------------- Static/Basic routes ----------------------
@app.route('/')
def home():
    return render_template('home.html')

@app.route('/events')
def events():
    return render_template('page.html', title='Events',
                           body='Reunions, guest lectures and meetups organised by the association.')

@app.route('/faculty')
def faculty():
    return render_template('page.html', title='Faculty',
                           body='Meet the faculty members who mentor our students and alumni.')

@app.route('/reachus')
def reach_us():
    return render_template('page.html', title='Reach Us',
                           body='Write to the alumni association office or use the contact form.')

@app.route('/form', methods=['GET', 'POST'])
def contact_form():
    """Contact form. Enquiries are logged, nothing is stored."""
    if request.method == 'GET':
        return render_template('form.html', errors={}, values={}, sent=False)

    values = {
        'name': request.form.get('name', '').strip(),
        'email': request.form.get('email', '').strip(),
        'message': request.form.get('message', '').strip(),
    }
    errors = {}
    for field in ('name', 'email', 'message'):
        if not values[field]:
            errors[field] = 'This field is required.'
    if values['email'] and '@' not in values['email']:
        errors['email'] = 'Enter a valid email address.'

    if errors:
        return render_template('form.html', errors=errors, values=values, sent=False), 400

    app.logger.info(f"Contact enquiry from {values['name']} <{values['email']}>")
    return render_template('form.html', errors={}, values={}, sent=True)

# ---------------------- Alumni page ----------------------
@app.route('/alumni')
def alumni_page():
    directory = get_directory()
    if 'q' in request.args:
        directory.set_search_term(request.args.get('q'))
    if 'course' in request.args:
        directory.set_course(request.args.get('course'))
    if request.args.get('focus') == '1':
        directory.state.search_focused = True
    save_directory(directory)

    return render_template(
        'alumni.html',
        state=directory.state,
        cards=[alumni_card(r) for r in directory.visible_results],
        total=directory.filtered_count,
        has_more=directory.has_more,
        empty_message=directory.empty_message(),
        courses=COURSE_OPTIONS,
        slides=SLIDES,
        carousel_interval_ms=int(app.config['CAROUSEL_INTERVAL'] * 1000),
        default_image=DEFAULT_ALUMNI_IMAGE,
    )

@app.route('/alumni/search', methods=['POST'])
def alumni_search():
    """Submitting the search form only drops focus; filters follow the live query."""
    directory = get_directory()
    directory.submit_search()
    save_directory(directory)
    return redirect(url_for('alumni_page'))

@app.route('/alumni/reset', methods=['POST'])
def alumni_reset():
    directory = get_directory()
    directory.reset()
    save_directory(directory)
    return redirect(url_for('alumni_page'))

# ---------------------- API endpoints ----------------------
@app.route('/api/alumni/more', methods=['POST'])
def api_alumni_more():
    """
    Load-more sentinel became visible: reveal the next page for this visitor.
    Response:
    { "success": true, "alumni": [...], "visible_count": 50, "total": 73, "has_more": true }
    """
    try:
        directory = get_directory()
        revealed = directory.reveal_more()
        save_directory(directory)
        return jsonify({
            "success": True,
            "alumni": [alumni_card(r) for r in revealed],
            "visible_count": directory.state.visible_count,
            "total": directory.filtered_count,
            "has_more": directory.has_more
        }), 200
    except Exception as e:
        app.logger.error(f"Error revealing alumni: {e}")
        return jsonify({"success": False, "error": f"Server error: {str(e)}"}), 500

@app.route('/api/alumni', methods=['GET'])
def api_get_alumni():
    """
    Return filtered, sorted alumni without touching the visitor's page state.
    Query params: q, course, limit (default page size), offset (default 0)
    """
    try:
        limit = _int_arg('limit', app.config['PAGE_SIZE'])
        if limit <= 0:
            limit = app.config['PAGE_SIZE']
        limit = min(limit, API_MAX_LIMIT)
        offset = max(_int_arg('offset', 0), 0)

        results = filter_and_sort(
            app.config['ALUMNI_RECORDS'],
            request.args.get('q', ''),
            request.args.get('course', '')
        )
        page = results[offset:offset + limit]

        return jsonify({
            "success": True,
            "total": len(results),
            "offset": offset,
            "limit": limit,
            "has_more": offset + len(page) < len(results),
            "alumni": [alumni_card(r) for r in page]
        }), 200
    except Exception as e:
        app.logger.error(f"Error fetching alumni: {e}")
        return jsonify({"success": False, "error": f"Server error: {str(e)}"}), 500

@app.route('/api/courses', methods=['GET'])
def api_courses():
    return jsonify({"success": True, "courses": COURSE_OPTIONS}), 200

@app.route('/api/carousel', methods=['GET'])
def api_carousel():
    """Slides plus the slide active right now for this visitor."""
    directory = get_directory()
    state = directory.state
    save_directory(directory)
    return jsonify({
        "success": True,
        "slides": SLIDES,
        "interval": app.config['CAROUSEL_INTERVAL'],
        "active_index": state.carousel_index % len(SLIDES)
    }), 200

# ---------------------- Error handler ----------------------
@app.errorhandler(404)
def not_found(e):
    return 'Page not found', 404

if __name__ == "__main__":
    app.run()
