"""
Design-system stylesheet for rendered blog documents.

The stylesheet is a single constant so the assembled output, the standalone
export and the clipboard copy all carry byte-identical CSS. Every rule is
scoped to the root wrapper so the document can be embedded in a host page.
"""

WRAPPER_ID = "blog-wrapper"

BRAND_ACCENT = "#ec7b5d"
BRAND_TEXT = "#575756"
BRAND_LIGHT = "#fdf6f4"

BLOG_CSS = f"""<style>
@import url('https://fonts.googleapis.com/css2?family=Comfortaa:wght@400;700&family=Open+Sans:wght@400;600&display=swap');

#{WRAPPER_ID} {{
  font-family: 'Open Sans', sans-serif;
  color: {BRAND_TEXT};
  line-height: 1.6;
  max-width: 1000px;
  margin: 0 auto;
}}
#{WRAPPER_ID} h2,
#{WRAPPER_ID} h3 {{
  font-family: 'Comfortaa', cursive;
  color: {BRAND_ACCENT};
  font-weight: 700;
  margin-bottom: 0.5em;
}}
#{WRAPPER_ID} h2 {{ font-size: 1.8rem; margin-top: 1.5em; scroll-margin-top: 100px; }}
#{WRAPPER_ID} h3 {{ font-size: 1.4rem; margin-top: 1.2em; }}
#{WRAPPER_ID} p {{ margin-bottom: 1em; }}
#{WRAPPER_ID} ul {{ margin-bottom: 1em; padding-left: 1.5em; list-style-type: disc; }}
#{WRAPPER_ID} li {{ margin-bottom: 0.5em; }}
#{WRAPPER_ID} strong {{ color: {BRAND_ACCENT}; font-weight: 600; }}

.blog-keyword {{ color: {BRAND_ACCENT}; font-weight: 700; }}

.blog-summary {{ font-style: italic; color: #888; margin-bottom: 1.5rem; }}

.blog-snippet {{
  background-color: {BRAND_LIGHT};
  border-left: 5px solid {BRAND_ACCENT};
  padding: 1rem 1.5rem;
  margin-bottom: 1.5rem;
  font-weight: 600;
  border-radius: 0 8px 8px 0;
}}

.blog-section {{ margin-bottom: 2.5rem; clear: both; }}
.blog-grid {{ display: flex; flex-wrap: wrap; gap: 3rem; align-items: center; }}
.blog-col {{ flex: 1 1 300px; }}
.blog-float-right {{ float: right; max-width: 40%; margin: 0 0 1.5rem 2rem; }}

.blog-img {{
  width: 100%;
  height: auto;
  display: block;
  border-radius: 12px;
  box-shadow: 0 4px 12px rgba(0,0,0,0.08);
  transition: transform 0.4s ease, box-shadow 0.4s ease;
}}
.blog-img:hover {{ transform: scale(1.015); box-shadow: 0 12px 24px rgba(0,0,0,0.12); }}

.blog-header-image {{
  width: 100%;
  height: auto;
  max-height: 500px;
  object-fit: cover;
  display: block;
  margin-bottom: 2rem;
  border-radius: 12px;
  box-shadow: 0 6px 16px rgba(0,0,0,0.12);
}}

.blog-toc {{
  display: inline-block;
  min-width: 250px;
  background-color: #fff;
  border: 1px solid #eee;
  border-radius: 8px;
  padding: 1.5rem;
  margin-bottom: 2rem;
}}
.blog-toc-title {{ display: block; font-family: 'Comfortaa', cursive; color: {BRAND_ACCENT}; font-weight: 700; margin-bottom: 0.5rem; }}
.blog-toc-list {{ list-style: none !important; padding-left: 0 !important; margin-bottom: 0 !important; }}
.blog-toc-list li {{ margin-bottom: 0.25rem !important; }}
.blog-toc-list a {{ color: {BRAND_TEXT}; text-decoration: none; font-size: 0.95rem; }}
.blog-toc-list a:hover {{ color: {BRAND_ACCENT}; }}

.blog-feature-highlight {{
  background-color: {BRAND_LIGHT};
  border-left: 6px solid {BRAND_ACCENT};
  padding: 2rem;
  margin: 2rem 0;
  border-radius: 0 12px 12px 0;
}}

.blog-quote-block {{ text-align: center; margin: 3rem 0; padding: 2rem; }}
.blog-quote-text {{ font-family: 'Comfortaa', cursive; font-size: 1.4rem; font-weight: 700; color: {BRAND_ACCENT}; line-height: 1.4; margin-bottom: 1rem; }}
.blog-quote-author {{ font-size: 0.9rem; text-transform: uppercase; letter-spacing: 1px; color: #888; }}

.blog-cta-block {{
  background-color: {BRAND_LIGHT};
  padding: 3rem;
  border-radius: 16px;
  text-align: center;
  box-shadow: 0 4px 12px rgba(0,0,0,0.05);
}}
.blog-btn-wrapper {{ margin: 3rem 0 2rem; clear: both; }}
.blog-btn {{
  display: inline-block;
  background-color: {BRAND_ACCENT};
  color: #ffffff !important;
  font-family: 'Comfortaa', cursive;
  font-weight: 700;
  padding: 12px 32px;
  border-radius: 8px;
  text-decoration: none;
  box-shadow: 0 4px 10px rgba(236, 123, 93, 0.25);
}}
.blog-btn:hover {{ background-color: #d66a4d; }}

.blog-video-container {{
  position: relative;
  padding-bottom: 56.25%;
  height: 0;
  overflow: hidden;
  max-width: 100%;
  background: #000;
  border-radius: 12px;
  margin: 2rem auto;
}}
.blog-video-container iframe {{ position: absolute; top: 0; left: 0; width: 100%; height: 100%; border: 0; }}

.blog-entity-list dl {{
  display: grid;
  grid-template-columns: auto 1fr;
  gap: 1rem 2rem;
  border: 1px solid #eee;
  border-radius: 12px;
  padding: 2rem;
  margin: 2rem 0;
}}
.blog-entity-list dt {{ font-family: 'Comfortaa', cursive; font-weight: 700; color: {BRAND_ACCENT}; }}
.blog-entity-list dd {{ margin: 0; color: #666; font-size: 0.95rem; }}

.blog-faq-container {{ background: {BRAND_LIGHT}; border-radius: 16px; padding: 3rem; margin-top: 4rem; }}
details.blog-faq-item {{
  background: #fff;
  margin-bottom: 1rem;
  border-radius: 8px;
  padding: 1rem 1.5rem;
  border-left: 4px solid {BRAND_ACCENT};
}}
summary.blog-faq-question {{
  font-family: 'Comfortaa', cursive;
  color: {BRAND_ACCENT};
  font-weight: 700;
  font-size: 1.1rem;
  cursor: pointer;
  list-style: none;
  display: flex;
  justify-content: space-between;
  align-items: center;
}}
summary.blog-faq-question::-webkit-details-marker {{ display: none; }}
summary.blog-faq-question::after {{ content: '+'; font-size: 1.5rem; transition: transform 0.3s ease; }}
details[open] summary.blog-faq-question::after {{ transform: rotate(45deg); }}
.blog-faq-answer {{ font-size: 0.95rem; color: #666; margin-top: 0.5rem; padding-top: 0.5rem; border-top: 1px dashed #eee; }}

@media (max-width: 768px) {{
  .blog-grid {{ flex-direction: column; }}
  .blog-float-right {{ float: none; max-width: 100%; margin: 0 0 1.5rem 0; }}
  .blog-entity-list dl {{ grid-template-columns: 1fr; gap: 0.5rem; }}
  .blog-btn {{ width: 100%; box-sizing: border-box; text-align: center; }}
}}
</style>"""
