"""Jinja2 sources for the generated React modules."""

from __future__ import annotations

import textwrap
from typing import Dict

INDEX_TEMPLATE_NAME = "index.js"
MODULE_TEMPLATE_NAME = "module.js"

INDEX_TEMPLATE = textwrap.dedent(
    """\
    import React from 'react';
    import ReactDOM from 'react-dom';
    {% if router %}
    import { BrowserRouter as Router } from 'react-router-dom';
    {% endif %}
    {% if bootstrap %}
    import 'bootstrap/dist/css/bootstrap.min.css';
    {% endif %}
    import './index.css';
    import App from './App';
    import reportWebVitals from './reportWebVitals';

    ReactDOM.render(
    {% if router %}
      <Router>
        <React.StrictMode>
          <App />
        </React.StrictMode>
      </Router>,
    {% else %}
      <React.StrictMode>
        <App />
      </React.StrictMode>,
    {% endif %}
      document.getElementById('root')
    );

    reportWebVitals();
    """
)

_BOOTSTRAP_FORM = textwrap.dedent(
    """\
    {% if has_fields %}
    {% for field in fields.text %}
              <Form.Group className="mb-3" controlId="{{ field.lower }}">
                <Form.Label>*{{ field.mixed }}</Form.Label>
                <Form.Control type="text" onChange={_handleChange} value={formValues1.{{ field.lower }}} placeholder="" required />
              </Form.Group>
    {% endfor %}
    {% for field in fields.textarea %}
              <Form.Group className="mb-3" controlId="{{ field.lower }}">
                <Form.Label>{{ field.mixed }}</Form.Label>
                <Form.Control
                  as="textarea"
                  name="{{ field.lower }}"
                  value={formValues1.{{ field.lower }}}
                  onChange={_handleChange}
                  placeholder=""
                  style={ { height: '200px' } }
                  required
                />
              </Form.Group>
    {% endfor %}
    {% for field in fields.password %}
              <Form.Group className="mb-3" controlId="{{ field.lower }}">
                <Form.Label>*Select Password</Form.Label>
                <Form.Control type="password" onChange={_handleChange} value={formValues1.{{ field.lower }}} placeholder="Password Required" required />
              </Form.Group>
              <Form.Group className="mb-3" controlId="confirm_{{ field.lower }}">
                <Form.Label>*Confirm Password</Form.Label>
                <Form.Control type="password" onChange={_handleChange} onBlur={_handleVerifyForm} value={formValues1.confirm_{{ field.lower }}} placeholder="Confirm Password Required" required />
              </Form.Group>
              {formError1 && <Alert variant='danger'>Passwords must match!</Alert>}
    {% endfor %}
    {% for group in fields.checkbox %}
              <div key='inline-checkbox-{{ loop.index }}' className="mb-3">
    {% for field in group %}
                <Form.Check inline label="{{ field.mixed }}" name="checkboxgroup-{{ field.lower }}" type='checkbox' id='inline-checkbox-{{ field.lower }}' />
    {% endfor %}
              </div>
    {% endfor %}
    {% for group in fields.radio %}
    {% set group_index = loop.index %}
              <div key='inline-radio-{{ loop.index }}' className="mb-3">
    {% for field in group %}
                <Form.Check inline label="{{ field.mixed }}" name="radiogroup-{{ group_index }}" type='radio' id='inline-radio-{{ field.lower }}' />
    {% endfor %}
              </div>
    {% endfor %}
    {% for group in fields.select %}
              <Form.Group as={Col} controlId="formGridState{{ loop.index }}">
    {% for field in group %}
                <Form.Label>{{ field.mixed }}</Form.Label>
                <Form.Select name="{{ field.lower }}" defaultValue="Choose...">
                  <option>Choose...</option>
                  <option value="IL">Illinois</option>
                  <option value="MI">Michigan</option>
                  <option value="NY">New York</option>
                </Form.Select>
    {% endfor %}
              </Form.Group>
    {% endfor %}
    {% else %}
              <Form.Group className="mb-3" controlId="email">
                <Form.Label>*Email address</Form.Label>
                <Form.Control type="email" onChange={_handleChange} value={formValues1.email} placeholder="name@example.com" required />
              </Form.Group>
              <Form.Group className="mb-3" controlId="first_name">
                <Form.Label>*First Name</Form.Label>
                <Form.Control type="text" onChange={_handleChange} value={formValues1.first_name} placeholder="First Name Required" required />
              </Form.Group>
              <Form.Group className="mb-3" controlId="last_name">
                <Form.Label>*Last Name</Form.Label>
                <Form.Control type="text" onChange={_handleChange} value={formValues1.last_name} placeholder="Last Name Required" required />
              </Form.Group>
              <Form.Group className="mb-3" controlId="password">
                <Form.Label>*Select Password</Form.Label>
                <Form.Control type="password" onChange={_handleChange} value={formValues1.password} placeholder="Password Required" required />
              </Form.Group>
              <Form.Group className="mb-3" controlId="confirm_password">
                <Form.Label>*Confirm Password</Form.Label>
                <Form.Control type="password" onChange={_handleChange} onBlur={_handleVerifyForm} value={formValues1.confirm_password} placeholder="Confirm Password Required" required />
              </Form.Group>
              {formError1 && <Alert variant='danger'>Passwords must match!</Alert>}
    {% endif %}
              <Button variant="primary" type="submit" disabled={formError1}>
                Submit Form
              </Button>
    """
)

_PLAIN_FORM = textwrap.dedent(
    """\
    {% if has_fields %}
    {% for field in fields.text %}
              <div>
                <label htmlFor='{{ field.lower }}'>{{ field.mixed }} </label>
                <input
                  type='text'
                  id='{{ field.lower }}'
                  value={formValues1.{{ field.lower }}}
                  placeholder=''
                  onChange={_handleChange}
                  required
                />
              </div>
    {% endfor %}
    {% for field in fields.textarea %}
              <div>
                <label htmlFor='{{ field.lower }}'>{{ field.mixed }} </label>
                <textarea name='{{ field.lower }}' id='{{ field.lower }}' value={formValues1.{{ field.lower }}} onChange={_handleChange} placeholder='' style={ { height: '200px' } } required />
              </div>
    {% endfor %}
    {% for field in fields.password %}
              <fieldset>
                <label htmlFor='{{ field.lower }}'>*Select Password</label>
                <input type="password" id='{{ field.lower }}' onChange={_handleChange} value={formValues1.{{ field.lower }}} placeholder="Password Required" required />
                <label htmlFor='confirm_{{ field.lower }}'>*Confirm Password</label>
                <input type="password" id='confirm_{{ field.lower }}' onChange={_handleChange} onBlur={_handleVerifyForm} value={formValues1.confirm_{{ field.lower }}} placeholder="Confirm Password Required" required />
                {formError1 && <p className='form-error'>Passwords must match!</p>}
              </fieldset>
    {% endfor %}
    {% for group in fields.checkbox %}
              <div key='inline-checkbox-{{ loop.index }}' className="mb-3">
    {% for field in group %}
                <input name="checkboxgroup-{{ field.lower }}" type='checkbox' id='inline-checkbox-{{ field.lower }}' />
                <label htmlFor='inline-checkbox-{{ field.lower }}'>{{ field.mixed }}</label>
    {% endfor %}
              </div>
    {% endfor %}
    {% for group in fields.radio %}
    {% set group_index = loop.index %}
              <div key='inline-radio-{{ loop.index }}' className="mb-3">
    {% for field in group %}
                <input name="radiogroup-{{ group_index }}" type='radio' id='inline-radio-{{ field.lower }}' />
                <label htmlFor='inline-radio-{{ field.lower }}'>{{ field.mixed }}</label>
    {% endfor %}
              </div>
    {% endfor %}
    {% for group in fields.select %}
              <fieldset id="formGridState{{ loop.index }}">
    {% for field in group %}
                <label htmlFor="{{ field.lower }}">{{ field.mixed }}</label>
                <select name="{{ field.lower }}" id="{{ field.lower }}" defaultValue="Choose...">
                  <option>Choose...</option>
                  <option value="IL">Illinois</option>
                  <option value="MI">Michigan</option>
                  <option value="NY">New York</option>
                </select>
    {% endfor %}
              </fieldset>
    {% endfor %}
              <button type="submit" disabled={formError1} className='form-button'>
                Submit Form
              </button>
    {% else %}
              <div>
                <label htmlFor='username'>Username: </label>
                <input
                  type='text'
                  id='username'
                  value={formValues1.username}
                  onChange={_handleChange}
                  required
                />
              </div>
              <div>
                <label htmlFor='password'>Password: </label>
                <input
                  type='password'
                  id='password'
                  value={formValues1.password}
                  onChange={_handleChange}
                  required
                />
              </div>
              <input type='submit' value='Member Login' />
    {% endif %}
    """
)

MODULE_TEMPLATE = textwrap.dedent(
    """\
    import React from 'react';
    {% if react_hooks %}
    import { {{ react_hooks|list_join }} } from 'react';
    {% endif %}
    {% if parent_context_hint %}
    // If you are using context exported from another parent component
    // import { SampleContext } from '../../App';
    // import { SampleDispatchContext } from '../../App';
    {% endif %}
    {% if router_imports %}
    import { {{ router_imports|list_join }} } from "react-router-dom";
    {% endif %}
    {% if bootstrap_imports %}
    import { {{ bootstrap_imports|list_join }} } from 'react-bootstrap';
    {% endif %}
    {% for child in children %}
    import { {{ child }} } from '{{ child_import_prefix }}{{ child }}';
    {% endfor %}
    import './App.css';

    /*==========================================================================================*/
    {% for context in contexts %}
    export const {{ context.mixed }} = React.createContext();
    {% endfor %}
    {% for context in dispatch_contexts %}
    export const {{ context.mixed }} = React.createContext();
    {% endfor %}

    export const {{ name }} = (props) => {
    {% if parent_context_hint %}

      // If you are using context exported from another parent component
      // const session = useContext(SampleContext);
      // const dispatch = useContext(SampleDispatchContext);
    {% endif %}
    {% if uses_location %}
      const location = useLocation();
    {% endif %}
    {% if uses_history %}
      const history = useHistory();
    {% endif %}
    {% if uses_params %}
      const params = useParams();
    {% endif %}
    {% for reducer in reducers %}

      // This useReducer hook can call local functions to handle the requested actions if necessary
      function {{ reducer.name.default }}(state, action) {
        switch (action.type) {
          case 'Case1':
            return state;
          case 'Case2':
            return state;
          case 'Case3':
            return state;
          default:
            return state;
        }
      }

      // sample initialState{{ reducer.index }}
      const initialState{{ reducer.index }} = {
        user: "",
        password: "",
        loggedin: false,
      };

      const [sampleState{{ reducer.index }}, dispatch{{ reducer.index }}] = useReducer({{ reducer.name.default }}, initialState{{ reducer.index }});
    {% endfor %}
    {% if form %}
    {% for state in states %}

      // sample initialFormValues{{ state.index }}
      const initialFormValues{{ state.index }} = {
        first_name: "",
        last_name: "",
        email_address: "",
      };
      const [formValues{{ state.index }}, setFormValues{{ state.index }}] = useState(initialFormValues{{ state.index }});
      const [formError{{ state.index }}, setFormError{{ state.index }}] = useState(false);
    {% endfor %}
    {% else %}
    {% for state in states %}
      const [{{ state.name.lower }}, set{{ state.name.mixed }}] = useState({});
    {% endfor %}
    {% endif %}
    {% if form %}

      // A typical _handleChange controlled form field handler
      const _handleChange = (event) => {
        setFormValues1((prevState) => {
          return {
            ...prevState,
            [event.target.id]: event.target.value,
          };
        });
      };

      // A typical onBlur form field change validation handler
      const _handleVerifyForm = (event) => {
        if (formValues1.{{ password_field }} !== formValues1.confirm_{{ password_field }}) {
          setFormError1(true);
        } else {
          setFormError1(false);
        }
      };

      // example handle user registration request via API {{ fetch_method|lower }}
      const _handleRegistration = async (event) => {
        event.preventDefault();
        const API_URI = 'http://localhost:4000/register';

        try {
          const response = await fetch(API_URI, {
            "method": '{{ fetch_method }}',
            "body": JSON.stringify(formValues1),
            "headers": {
              "Content-Type": 'application/json'
            }
          });

          const data = await response.json();
          if ((response.status === 200) || (response.status === 201)) {
            setFormValues1(initialFormValues1);
          } else {
            console.error('Registration Failed', data);
          }
        } catch (error) {
          console.error(error);
        }
      };
    {% endif %}
    {% for effect in effects %}

      /*==========================================================================================*/
      // Preferred method formatting of placing async function calls inside the useEffect as an
      // anonymous function
      useEffect(() => {
        async function {{ effect.name.default }}() {
          try {

          } catch (error) {
            console.error(error);
          }
        }
        {{ effect.name.default }}();
      }, []);
      /*==========================================================================================*/
    {% endfor %}

      return (
        <div className="{{ container_class }}">
    {% for provider in providers %}
          {{ provider.open }}
    {% endfor %}
    {% for child in children %}
          <{{ child }} />
    {% endfor %}
    {% if form %}
          <>
    {% if bootstrap %}
            <Form onSubmit={_handleRegistration}>
    __BOOTSTRAP_FORM__
            </Form>
    {% else %}
            <form onSubmit={_handleRegistration}>
    __PLAIN_FORM__
            </form>
    {% endif %}
          </>
    {% endif %}
    {% if map %}
          {/* Sample array value mapping to JSX per-item output */}
          {listing.map((item, index) => (
            <div key={index}>
              <li>{item.name}</li>
            </div>
          ))}
    {% endif %}
    {% if switch %}
          <Switch>
    {% endif %}
    {% if route %}
            {/* Sample Route Variations */}
            <Route path="/login" exact>
              <SampleComponent />
            </Route>
            <Route path="/logout/:id" component={SampleComponent} exact />
            <Route path="/somepath" render={routeProps => (<Component {...routeProps} />)} />
            <Route path="/home" render={() => <div>Home</div>} />
    {% endif %}
    {% if switch %}
          </Switch>
    {% endif %}
    {% if link %}
          <Link to="/">Home</Link>
    {% endif %}
    {% for provider in providers|reverse %}
          {{ provider.close }}
    {% endfor %}
        </div>
      );
    };

    export default {{ name }};
    """
).replace("__BOOTSTRAP_FORM__\n", _BOOTSTRAP_FORM).replace("__PLAIN_FORM__\n", _PLAIN_FORM)

TEMPLATE_SOURCES: Dict[str, str] = {
    INDEX_TEMPLATE_NAME: INDEX_TEMPLATE,
    MODULE_TEMPLATE_NAME: MODULE_TEMPLATE,
}


__all__ = [
    "INDEX_TEMPLATE",
    "INDEX_TEMPLATE_NAME",
    "MODULE_TEMPLATE",
    "MODULE_TEMPLATE_NAME",
    "TEMPLATE_SOURCES",
]
